"""Derived statistics and chart series over the session state."""

from __future__ import annotations

import random
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable

from crm_lite.config import ReportingConfig
from crm_lite.models import DEFAULT_CATEGORY
from crm_lite.store.state import DomainState

_MONTH_ABBR = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class QuickStats:
    total_revenue: Decimal
    profit_margin: Decimal
    avg_customer_value: Decimal
    growth_rate: float


@dataclass(frozen=True)
class CategoryStats:
    """Customer count and assumed revenue share for one category.

    Revenue is split evenly per customer since individual sales are not
    recorded.
    """

    category: str
    count: int
    revenue: Decimal
    avg_value: Decimal


@dataclass(frozen=True)
class FinancialReport:
    capital: Decimal
    revenue: Decimal
    profit: Decimal
    roi: Decimal


def month_label(year: int, month: int) -> str:
    """Short label such as ``"Jan 25"``."""
    return f"{_MONTH_ABBR[month - 1]} {year % 100:02d}"


def trailing_months(now: datetime, count: int) -> list[tuple[int, int]]:
    """Return ``(year, month)`` for the last ``count`` months, oldest first."""
    months = []
    for offset in range(count - 1, -1, -1):
        index = now.year * 12 + (now.month - 1) - offset
        months.append((index // 12, index % 12 + 1))
    return months


class ReportingEngine:
    """Pure computations over customers, product counters and the clock.

    Parameters
    ----------
    state : DomainState
        Session state to read from. Never mutated.
    clock : Callable[[], datetime] | None
        Wall-clock source (default: current UTC time).
    rng : random.Random | None
        Randomness for the illustrative sales series.
    config : ReportingConfig | None
        Window and series sizes.
    """

    def __init__(
        self,
        state: DomainState,
        clock: Callable[[], datetime] | None = None,
        rng: random.Random | None = None,
        config: ReportingConfig | None = None,
    ) -> None:
        self.state = state
        self.clock = clock or (lambda: datetime.now(timezone.utc))
        self.rng = rng or random.Random()
        self.config = config or ReportingConfig()

    def quick_stats(self) -> QuickStats:
        products = self.state.products
        revenue = products.revenue
        count = len(self.state.customers)
        if products.capital > 0:
            margin = (revenue - products.capital) / products.capital * 100
        else:
            margin = Decimal("0")
        return QuickStats(
            total_revenue=revenue,
            profit_margin=margin,
            avg_customer_value=revenue / count if count else Decimal("0"),
            growth_rate=self.growth_rate(),
        )

    def growth_rate(self) -> float:
        """Compare customers added in the recent window with all earlier ones.

        This is not a month-over-month rate: the earlier group is everything
        before the window, so the figure drifts as the customer base ages.
        """
        cutoff = self.clock() - timedelta(days=self.config.window_days)
        recent = sum(1 for c in self.state.customers if c.date_added > cutoff)
        previous = len(self.state.customers) - recent
        if previous == 0:
            return 100.0 if recent > 0 else 0.0
        return (recent - previous) / previous * 100

    def category_breakdown(self) -> list[CategoryStats]:
        """Per-category counts in first-seen order with equal revenue shares."""
        customers = self.state.customers
        if not customers:
            return []

        counts: dict[str, int] = {}
        for customer in customers:
            category = customer.category or DEFAULT_CATEGORY
            counts[category] = counts.get(category, 0) + 1

        per_customer = self.state.products.revenue / len(customers)
        return [
            CategoryStats(category=name, count=count, revenue=count * per_customer, avg_value=per_customer)
            for name, count in counts.items()
        ]

    def monthly_growth_series(self) -> dict[str, int]:
        """Customers added in each trailing calendar month, zero months included."""
        months = trailing_months(self.clock(), self.config.series_months)
        tally = {month: 0 for month in months}
        for customer in self.state.customers:
            added = customer.date_added.astimezone(timezone.utc)
            key = (added.year, added.month)
            if key in tally:
                tally[key] += 1
        return {month_label(*month): count for month, count in tally.items()}

    def monthly_sales_series(self) -> dict[str, Decimal]:
        """Spread total sales over the trailing months with random jitter.

        Illustrative only: no per-sale history exists to derive a real
        series from.
        """
        products = self.state.products
        months = trailing_months(self.clock(), self.config.series_months)
        base = Decimal(products.sold) / len(months)
        series = {}
        for month in months:
            variation = (self.rng.random() - 0.5) * (self.config.jitter * 2)
            amount = base * (1 + Decimal(str(variation))) * products.price
            series[month_label(*month)] = max(Decimal("0"), amount).quantize(_CENTS)
        return series

    def financial_report(self) -> FinancialReport:
        products = self.state.products
        return FinancialReport(
            capital=products.capital,
            revenue=products.revenue,
            profit=products.profit,
            roi=products.roi,
        )

    def product_breakdown(self) -> dict[str, float]:
        """Sold and remaining stock as percentages of the total."""
        products = self.state.products
        if products.total == 0:
            return {"sold_pct": 0.0, "remaining_pct": 0.0}
        return {
            "sold_pct": round(products.sold / products.total * 100, 1),
            "remaining_pct": round(products.remaining / products.total * 100, 1),
        }

    def dashboard(self) -> dict[str, object]:
        """Headline figures for the main screen."""
        products = self.state.products
        return {
            "total_customers": len(self.state.customers),
            "products_sold": products.sold,
            "available_funds": products.revenue,
            "total_capital": products.capital,
        }
