"""Aggregate product/inventory counters."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class ProductCounters:
    """Singleton inventory aggregate.

    Replaced as a whole on update, never mutated field by field.
    """

    total: int = 0
    sold: int = 0
    price: Decimal = field(default_factory=lambda: Decimal("0"))
    capital: Decimal = field(default_factory=lambda: Decimal("0"))

    @property
    def revenue(self) -> Decimal:
        return self.sold * self.price

    @property
    def remaining(self) -> int:
        return max(0, self.total - self.sold)

    @property
    def profit(self) -> Decimal:
        return self.revenue - self.capital

    @property
    def roi(self) -> Decimal:
        """Return on investment in percent, 0 when no capital is invested."""
        if self.capital == 0:
            return Decimal("0")
        return self.profit / self.capital * 100
