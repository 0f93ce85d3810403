"""In-memory mirror of the persisted blobs."""

import logging
from dataclasses import dataclass, field
from typing import Any

from crm_lite.exceptions import StorageError
from crm_lite.models import Customer, ProductCounters, default_settings
from crm_lite.storage import CUSTOMERS_KEY, PRODUCTS_KEY, SETTINGS_KEY, KeyValueStore
from crm_lite.storage.serialization import (
    customer_to_dict,
    customers_from_list,
    products_from_dict,
    products_to_dict,
)

logger = logging.getLogger(__name__)


@dataclass
class DomainState:
    """Session state for customers, product counters and settings.

    Each blob is saved as a whole by the matching ``save_*`` method. Callers
    mutate memory first and then save; there is no dirty tracking and no
    partial write.
    """

    kv: KeyValueStore
    customers: list[Customer] = field(default_factory=list)
    products: ProductCounters = field(default_factory=ProductCounters)
    settings: dict[str, Any] | None = None

    @classmethod
    def load(cls, kv: KeyValueStore) -> "DomainState":
        """Load all blobs from ``kv``. Missing blobs give empty defaults.

        Settings stay ``None`` until the settings store initializes them, so
        a first run can be told apart from an existing configuration.
        """
        state = cls(kv=kv)

        raw_customers = kv.read_blob(CUSTOMERS_KEY)
        if raw_customers is not None:
            state.customers = customers_from_list(raw_customers)

        raw_products = kv.read_blob(PRODUCTS_KEY)
        if raw_products is not None:
            state.products = products_from_dict(raw_products)

        raw_settings = kv.read_blob(SETTINGS_KEY)
        if raw_settings is not None:
            if not isinstance(raw_settings, dict):
                raise StorageError("Settings blob must be an object")
            state.settings = raw_settings

        logger.info(
            "Loaded state: %d customers, settings %s",
            len(state.customers),
            "present" if state.settings is not None else "absent",
        )
        return state

    def save_customers(self) -> None:
        self.kv.write_blob(CUSTOMERS_KEY, [customer_to_dict(c) for c in self.customers])

    def save_products(self) -> None:
        self.kv.write_blob(PRODUCTS_KEY, products_to_dict(self.products))

    def save_settings(self) -> None:
        if self.settings is None:
            self.settings = default_settings()
        self.kv.write_blob(SETTINGS_KEY, self.settings)

    def save(self, *keys: str) -> None:
        """Save several blobs as one step.

        If a write fails, blobs already written in this call get their
        previous raw text back before the error propagates.
        """
        savers = {
            CUSTOMERS_KEY: self.save_customers,
            PRODUCTS_KEY: self.save_products,
            SETTINGS_KEY: self.save_settings,
        }
        snapshot = {key: self.kv.get(key) for key in keys}
        written = []
        try:
            for key in keys:
                savers[key]()
                written.append(key)
        except StorageError:
            for key in reversed(written):
                self._restore_raw(key, snapshot[key])
            raise

    def _restore_raw(self, key: str, raw: str | None) -> None:
        try:
            if raw is None:
                self.kv.remove(key)
            else:
                self.kv.set(key, raw)
        except StorageError:
            logger.error("Could not restore blob %s after a failed save", key, exc_info=True)

    def reset(self) -> None:
        """Clear every blob in the store and return memory to defaults."""
        self.kv.clear()
        self.customers = []
        self.products = ProductCounters()
        self.settings = None
        logger.info("All data cleared")

    def summary(self) -> dict[str, int]:
        """Return summary counts of the session data."""
        return {
            "customers": len(self.customers),
            "products_total": self.products.total,
            "products_sold": self.products.sold,
            "categories": len((self.settings or {}).get("categories", [])),
        }
