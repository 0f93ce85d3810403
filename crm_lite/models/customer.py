"""Customer model."""

from dataclasses import dataclass
from datetime import datetime

EMAIL_NOT_AVAILABLE = "N/A"
DEFAULT_CATEGORY = "Regular"


@dataclass
class Customer:
    """One client record.

    ``customer_id`` and ``date_added`` are assigned at creation and never
    change. ``last_modified`` stays ``None`` until the first edit.
    """

    customer_id: str
    name: str
    phone: str
    address: str
    date_added: datetime
    email: str = EMAIL_NOT_AVAILABLE
    category: str = DEFAULT_CATEGORY
    notes: str = ""
    last_modified: datetime | None = None
