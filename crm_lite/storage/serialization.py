"""Conversion between domain models and JSON-ready blob records."""

from dataclasses import fields
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation
from typing import Any

from crm_lite.exceptions import FormatError
from crm_lite.models import DEFAULT_CATEGORY, EMAIL_NOT_AVAILABLE, Customer, ProductCounters

# Model attribute -> persisted key, where they differ
_CUSTOMER_KEYS = {
    "customer_id": "id",
    "date_added": "dateAdded",
    "last_modified": "lastModified",
}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def parse_datetime(value: Any) -> datetime:
    """Parse an ISO 8601 timestamp; naive values are taken as UTC."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value)
        except ValueError as e:
            raise FormatError(f"Invalid timestamp: {value!r}") from e
    else:
        raise FormatError(f"Invalid timestamp: {value!r}")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_decimal(value: Any) -> Decimal:
    """Parse a money amount stored as a string or JSON number."""
    if isinstance(value, bool) or value is None:
        raise FormatError(f"Invalid amount: {value!r}")
    try:
        return Decimal(str(value))
    except InvalidOperation as e:
        raise FormatError(f"Invalid amount: {value!r}") from e


def parse_count(value: Any) -> int:
    """Parse a whole-number counter."""
    if isinstance(value, bool):
        raise FormatError(f"Invalid count: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError as e:
            raise FormatError(f"Invalid count: {value!r}") from e
    raise FormatError(f"Invalid count: {value!r}")


def customer_to_dict(customer: Customer) -> dict[str, Any]:
    """Convert a customer to its persisted record.

    ``lastModified`` is omitted until the record has been edited.
    """
    result = {}
    for f in fields(customer):
        value = getattr(customer, f.name)
        if f.name == "last_modified" and value is None:
            continue
        result[_CUSTOMER_KEYS.get(f.name, f.name)] = serialize_value(value)
    return result


def customer_from_dict(record: Any) -> Customer:
    """Build a customer from a persisted record."""
    if not isinstance(record, dict):
        raise FormatError(f"Customer record must be an object, got {type(record).__name__}")

    missing = [k for k in ("id", "name", "phone", "address", "dateAdded") if k not in record]
    if missing:
        raise FormatError(f"Customer record missing fields: {', '.join(missing)}")

    last_modified = record.get("lastModified")
    return Customer(
        customer_id=str(record["id"]),
        name=str(record["name"]),
        phone=str(record["phone"]),
        address=str(record["address"]),
        date_added=parse_datetime(record["dateAdded"]),
        email=str(record.get("email") or EMAIL_NOT_AVAILABLE),
        category=str(record.get("category") or DEFAULT_CATEGORY),
        notes=str(record.get("notes") or ""),
        last_modified=parse_datetime(last_modified) if last_modified else None,
    )


def customers_from_list(records: Any) -> list[Customer]:
    """Decode a customers blob, preserving order."""
    if not isinstance(records, list):
        raise FormatError(f"Customers must be a list, got {type(records).__name__}")
    return [customer_from_dict(r) for r in records]


def products_to_dict(counters: ProductCounters) -> dict[str, Any]:
    """Convert product counters to their persisted record."""
    return {f.name: serialize_value(getattr(counters, f.name)) for f in fields(counters)}


def products_from_dict(record: Any) -> ProductCounters:
    """Build product counters from a persisted record; absent or null fields are 0."""
    if not isinstance(record, dict):
        raise FormatError(f"Products must be an object, got {type(record).__name__}")
    return ProductCounters(
        total=parse_count(record.get("total") or 0),
        sold=parse_count(record.get("sold") or 0),
        price=parse_decimal(record.get("price") or 0),
        capital=parse_decimal(record.get("capital") or 0),
    )
