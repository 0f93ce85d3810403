"""Import, export, backup and restore of the session data."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping

from crm_lite.exceptions import FormatError, StorageError
from crm_lite.storage import CUSTOMERS_KEY, PRODUCTS_KEY, SETTINGS_KEY
from crm_lite.storage.serialization import (
    customer_to_dict,
    customers_from_list,
    products_from_dict,
    products_to_dict,
    serialize_value,
)
from crm_lite.store.state import DomainState

logger = logging.getLogger(__name__)


def dated_filename(prefix: str, now: datetime) -> str:
    """File name such as ``crm_data_2025-01-31.json``."""
    return f"{prefix}_{now.date().isoformat()}.json"


def write_document(path: str | Path, document: Mapping[str, Any] | list[Any]) -> Path:
    """Write a document as indented JSON."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(document, f, indent=2, ensure_ascii=False)
    except OSError as e:
        raise StorageError(f"Cannot write {path}: {e}") from e
    logger.info("Wrote %s", path)
    return path


def read_document(path: str | Path) -> Any:
    """Read a JSON document from disk."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Cannot read {path}: {e}") from e
    return _parse(text)


def _parse(document: str | bytes | Mapping[str, Any]) -> Any:
    if isinstance(document, Mapping):
        return document
    try:
        return json.loads(document)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise FormatError("Error reading file. Please ensure it's a valid JSON file.") from e


def _customers_blob(state: DomainState) -> list[dict[str, Any]]:
    return [customer_to_dict(c) for c in state.customers]


def export_data(state: DomainState, now: datetime) -> dict[str, Any]:
    """Customers and product counters, stamped with the export time."""
    return {
        "customers": _customers_blob(state),
        "products": products_to_dict(state.products),
        "exportDate": serialize_value(now),
    }


def export_customers_only(state: DomainState) -> list[dict[str, Any]]:
    return _customers_blob(state)


def export_sales_data(state: DomainState) -> dict[str, Any]:
    return products_to_dict(state.products)


def export_financial_data(state: DomainState, now: datetime) -> dict[str, Any]:
    products = state.products
    return serialize_value({
        "totalCapital": products.capital,
        "totalRevenue": products.revenue,
        "totalProfit": products.profit,
        "exportDate": now,
    })


def create_backup(state: DomainState, now: datetime) -> dict[str, Any]:
    """All three blobs plus the backup time."""
    return {
        "customers": _customers_blob(state),
        "products": products_to_dict(state.products),
        "settings": state.settings if state.settings is not None else {},
        "backupDate": serialize_value(now),
    }


def _load_into(state: DomainState, data: Any, with_settings: bool, kind: str) -> None:
    """Validate ``data`` fully, then replace state and save.

    Nothing is touched unless every record decodes.
    """
    if not isinstance(data, Mapping) or data.get("customers") is None or data.get("products") is None:
        raise FormatError(f"Invalid {kind} format: customers and products are required")

    customers = customers_from_list(data["customers"])
    products = products_from_dict(data["products"])
    settings = data.get("settings") if with_settings else None
    if settings is not None and not isinstance(settings, Mapping):
        raise FormatError(f"Invalid {kind} format: settings must be an object")

    previous = (list(state.customers), state.products, state.settings)
    state.customers[:] = customers
    state.products = products
    if settings:
        state.settings = dict(settings)
    keys = [CUSTOMERS_KEY, PRODUCTS_KEY] + ([SETTINGS_KEY] if settings else [])
    try:
        state.save(*keys)
    except StorageError:
        state.customers[:], state.products, state.settings = previous
        raise

    logger.info("Loaded %s: %d customers", kind, len(customers))


def import_data(state: DomainState, document: str | bytes | Mapping[str, Any]) -> None:
    """Replace customers and product counters from an export document."""
    _load_into(state, _parse(document), with_settings=False, kind="import")


def restore_backup(state: DomainState, document: str | bytes | Mapping[str, Any]) -> None:
    """Replace all data from a backup; settings only when the backup has them."""
    _load_into(state, _parse(document), with_settings=True, kind="backup")


def reset_system(state: DomainState) -> None:
    """Erase all data and settings."""
    state.reset()
