"""Sample customers and product counters for demos."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Callable

from crm_lite.exceptions import StorageError
from crm_lite.generators.base import BaseGenerator
from crm_lite.models import Customer, ProductCounters
from crm_lite.models.settings import DEFAULT_CATEGORIES
from crm_lite.storage import CUSTOMERS_KEY, PRODUCTS_KEY
from crm_lite.store.customers import new_customer_id
from crm_lite.store.state import DomainState

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS = ProductCounters(total=100, sold=25, price=Decimal("29.99"), capital=Decimal("5000"))


class SampleDataGenerator(BaseGenerator):
    """Generate realistic-looking customers.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    clock : Callable[[], datetime] | None
        Source of "now" for ``date_added``.
    max_age_days : int
        Spread ``date_added`` uniformly over this many past days; 0 stamps
        every customer with the current time.
    """

    CATEGORY_WEIGHTS = [0.50, 0.15, 0.15, 0.10, 0.10]

    def __init__(
        self,
        seed: int | None = None,
        clock: Callable[[], datetime] | None = None,
        max_age_days: int = 0,
    ) -> None:
        super().__init__(seed, clock=clock)
        self.max_age_days = max_age_days

    def generate(self) -> Customer:
        """Generate a single customer."""
        days_ago = self.rng.randint(0, self.max_age_days) if self.max_age_days else 0
        category = self.rng.choices(DEFAULT_CATEGORIES, weights=self.CATEGORY_WEIGHTS, k=1)[0]
        return Customer(
            customer_id=new_customer_id(),
            name=self.fake.name(),
            phone=self.fake.unique.phone_number(),
            address=self.fake.address().replace("\n", ", "),
            email=self.fake.email(),
            category=category,
            notes=self.fake.sentence(nb_words=6),
            date_added=self.clock() - timedelta(days=days_ago),
        )


def load_sample_data(
    state: DomainState,
    count: int = 3,
    seed: int | None = None,
    clock: Callable[[], datetime] | None = None,
    max_age_days: int = 0,
) -> list[Customer]:
    """Replace customers with generated ones and set demo product counters."""
    generator = SampleDataGenerator(seed=seed, clock=clock, max_age_days=max_age_days)
    customers = list(generator.generate_batch(count))

    previous = (list(state.customers), state.products)
    state.customers[:] = customers
    state.products = SAMPLE_PRODUCTS
    try:
        state.save(CUSTOMERS_KEY, PRODUCTS_KEY)
    except StorageError:
        state.customers[:], state.products = previous
        raise

    logger.info("Generated %d sample customers", count)
    return list(state.customers)
