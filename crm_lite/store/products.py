"""Product counter aggregate and its derived metrics."""

import logging
from decimal import Decimal
from typing import Any

from crm_lite.exceptions import FormatError, StorageError, ValidationError
from crm_lite.models import ProductCounters
from crm_lite.storage.serialization import parse_count
from crm_lite.store.state import DomainState

logger = logging.getLogger(__name__)


def _whole_number(label: str, value: Any) -> int:
    """Accept ints, whole floats and numeric strings, as stored counters are read."""
    try:
        return parse_count(value)
    except FormatError as e:
        raise ValidationError(f"{label} must be a whole number, got {value!r}") from e


class ProductCounterAggregator:
    """Hold total/sold/price/capital and derive revenue and profitability."""

    def __init__(self, state: DomainState) -> None:
        self.state = state

    @property
    def counters(self) -> ProductCounters:
        return self.state.products

    def update(
        self,
        total: int | float | str,
        sold: int | float | str,
        price: Decimal | int | str,
        capital: Decimal | int | str,
    ) -> ProductCounters:
        """Replace all four counters at once.

        Raises
        ------
        ValidationError
            If a count is not a whole number, any value is negative, or
            ``sold`` exceeds ``total``.
        """
        total = _whole_number("Total products", total)
        sold = _whole_number("Products sold", sold)
        try:
            price = Decimal(str(price))
            capital = Decimal(str(capital))
        except ArithmeticError as e:
            raise ValidationError("Price and capital must be numbers") from e
        if not (price.is_finite() and capital.is_finite()):
            raise ValidationError("Price and capital must be numbers")

        if total < 0 or sold < 0 or price < 0 or capital < 0:
            raise ValidationError("Please enter valid positive numbers")
        if sold > total:
            raise ValidationError("Products sold cannot exceed total products")

        previous = self.state.products
        self.state.products = ProductCounters(total=total, sold=sold, price=price, capital=capital)
        try:
            self.state.save_products()
        except StorageError:
            self.state.products = previous
            raise

        logger.info("Updated products: total=%d sold=%d price=%s capital=%s", total, sold, price, capital)
        return self.state.products

    def current_revenue(self) -> Decimal:
        return self.counters.revenue

    def remaining_stock(self) -> int:
        return self.counters.remaining

    def profit(self) -> Decimal:
        return self.counters.profit

    def roi(self) -> Decimal:
        """ROI in percent; 0 when capital is 0."""
        return self.counters.roi

    def summary(self) -> dict[str, Any]:
        """Figures for the product summary view."""
        return {
            "total": self.counters.total,
            "sold": self.counters.sold,
            "remaining": self.remaining_stock(),
        }
