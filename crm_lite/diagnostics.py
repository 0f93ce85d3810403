"""Storage self-test and system information."""

import logging
from typing import Any

from crm_lite import __version__
from crm_lite.exceptions import CrmError
from crm_lite.storage import CUSTOMERS_KEY, PRODUCTS_KEY, SETTINGS_KEY, KeyValueStore

logger = logging.getLogger(__name__)

_PROBE_KEY = "crm_selftest"


def _check_storage(kv: KeyValueStore) -> bool:
    try:
        kv.set(_PROBE_KEY, "test")
        ok = kv.get(_PROBE_KEY) == "test"
        kv.remove(_PROBE_KEY)
        return ok
    except CrmError:
        logger.warning("Storage probe failed", exc_info=True)
        return False


def _check_data_integrity(kv: KeyValueStore) -> bool:
    try:
        customers = kv.read_blob(CUSTOMERS_KEY)
        products = kv.read_blob(PRODUCTS_KEY)
    except CrmError:
        return False
    return isinstance(customers if customers is not None else [], list) and isinstance(
        products if products is not None else {}, dict
    )


def _check_settings(kv: KeyValueStore) -> bool:
    try:
        settings = kv.read_blob(SETTINGS_KEY)
    except CrmError:
        return False
    return isinstance(settings if settings is not None else {}, dict)


def run_self_test(kv: KeyValueStore) -> dict[str, bool]:
    """Run the storage, data-integrity and settings checks."""
    results = {
        "storage": _check_storage(kv),
        "data_integrity": _check_data_integrity(kv),
        "settings": _check_settings(kv),
    }
    logger.info("Self-test: %d/%d checks passed", sum(results.values()), len(results))
    return results


def system_info(kv: KeyValueStore) -> dict[str, Any]:
    """Record count, blob size and version."""
    customers_raw = kv.get(CUSTOMERS_KEY) or ""
    products_raw = kv.get(PRODUCTS_KEY) or ""
    customers = kv.read_blob(CUSTOMERS_KEY) or []
    return {
        "total_records": len(customers) + (1 if products_raw else 0),
        "data_size_kb": round((len(customers_raw) + len(products_raw)) / 1024, 1),
        "version": __version__,
    }
