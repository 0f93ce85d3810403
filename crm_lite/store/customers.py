"""Customer repository with uniqueness and required-field checks."""

from __future__ import annotations

import dataclasses
import logging
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Mapping

from crm_lite.exceptions import DuplicatePhoneError, NotFoundError, StorageError, ValidationError
from crm_lite.models import DEFAULT_CATEGORY, EMAIL_NOT_AVAILABLE, Customer
from crm_lite.store.state import DomainState

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "phone", "address")
EDITABLE_FIELDS = ("name", "phone", "address", "email", "category", "notes")
SEARCH_FIELDS = ("name", "phone")


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def new_customer_id() -> str:
    return uuid.uuid4().hex


def _clean(field_name: str, value: Any) -> str:
    """Trim a submitted value and apply the field's blank default."""
    text = "" if value is None else str(value).strip()
    if field_name == "email":
        return text or EMAIL_NOT_AVAILABLE
    if field_name == "category":
        return text or DEFAULT_CATEGORY
    return text


class CustomerRepository:
    """CRUD and search over the customer collection of a ``DomainState``.

    Parameters
    ----------
    state : DomainState
        Owned session state; ``state.customers`` is mutated in place.
    clock : Callable[[], datetime] | None
        Source of timestamps (default: current UTC time).
    id_factory : Callable[[], str] | None
        Source of new customer ids (default: uuid4 hex).
    """

    def __init__(
        self,
        state: DomainState,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self.state = state
        self.clock = clock or utcnow
        self.id_factory = id_factory or new_customer_id

    def _index_of(self, customer_id: str) -> int:
        for i, customer in enumerate(self.state.customers):
            if customer.customer_id == customer_id:
                return i
        raise NotFoundError(f"Customer {customer_id} not found")

    def _commit(self, previous: list[Customer]) -> None:
        """Save the customers blob, restoring ``previous`` if the write fails."""
        try:
            self.state.save_customers()
        except StorageError:
            self.state.customers[:] = previous
            raise

    def add(self, data: Mapping[str, Any]) -> Customer:
        """Create a customer from submitted form data.

        Raises
        ------
        ValidationError
            If name, phone or address is blank.
        DuplicatePhoneError
            If another customer already has this phone.
        """
        values = {name: _clean(name, data.get(name)) for name in EDITABLE_FIELDS}

        missing = [name for name in REQUIRED_FIELDS if not values[name]]
        if missing:
            raise ValidationError(f"Required fields missing: {', '.join(missing)}")

        if any(c.phone == values["phone"] for c in self.state.customers):
            raise DuplicatePhoneError(f"A customer with phone {values['phone']} already exists")

        customer = Customer(
            customer_id=self.id_factory(),
            date_added=self.clock(),
            **values,
        )
        previous = list(self.state.customers)
        self.state.customers.append(customer)
        self._commit(previous)

        logger.info("Added customer %s (%s)", customer.customer_id, customer.name)
        return customer

    def update(self, customer_id: str, patch: Mapping[str, Any]) -> Customer:
        """Merge ``patch`` over an existing customer.

        Phone uniqueness is not re-checked here; only creation enforces it.
        """
        index = self._index_of(customer_id)

        unknown = [k for k in patch if k not in EDITABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Fields cannot be edited: {', '.join(sorted(unknown))}")

        changes = {name: _clean(name, value) for name, value in patch.items()}
        blank = [name for name in REQUIRED_FIELDS if name in changes and not changes[name]]
        if blank:
            raise ValidationError(f"Required fields missing: {', '.join(blank)}")

        previous = list(self.state.customers)
        updated = dataclasses.replace(
            self.state.customers[index],
            last_modified=self.clock(),
            **changes,
        )
        self.state.customers[index] = updated
        self._commit(previous)

        logger.info("Updated customer %s: %s", customer_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def delete(self, customer_id: str) -> None:
        """Remove a customer."""
        index = self._index_of(customer_id)
        previous = list(self.state.customers)
        del self.state.customers[index]
        self._commit(previous)
        logger.info("Deleted customer %s", customer_id)

    def find_by_id(self, customer_id: str) -> Customer:
        """Return the customer with ``customer_id``."""
        return self.state.customers[self._index_of(customer_id)]

    def search(self, field: str, query: str) -> list[Customer]:
        """Case-insensitive substring search on name or phone.

        An empty result is not an error.
        """
        if field not in SEARCH_FIELDS:
            raise ValidationError(f"Cannot search by {field!r}; use one of {', '.join(SEARCH_FIELDS)}")
        needle = (query or "").strip().lower()
        if not needle:
            raise ValidationError(f"Please enter a {field} to search")
        return [c for c in self.state.customers if needle in getattr(c, field).lower()]

    def all(self) -> list[Customer]:
        """Return customers in insertion order."""
        return list(self.state.customers)

    def count(self) -> int:
        return len(self.state.customers)

    def purge_older_than(self, days: int) -> int:
        """Remove customers added ``days`` or more days ago.

        Returns
        -------
        int
            Number of removed customers.
        """
        if days < 0:
            raise ValidationError("Days must not be negative")
        cutoff = self.clock() - timedelta(days=days)
        previous = list(self.state.customers)
        kept = [c for c in previous if c.date_added > cutoff]
        removed = len(previous) - len(kept)
        self.state.customers[:] = kept
        self._commit(previous)
        logger.info("Cleanup removed %d customers added before %s", removed, cutoff.isoformat())
        return removed
