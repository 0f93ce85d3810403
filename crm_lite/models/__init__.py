"""Domain models for crm-lite."""

from crm_lite.models.customer import DEFAULT_CATEGORY, EMAIL_NOT_AVAILABLE, Customer
from crm_lite.models.product import ProductCounters
from crm_lite.models.settings import SETTINGS_SECTIONS, default_settings

__all__ = [
    "Customer",
    "DEFAULT_CATEGORY",
    "EMAIL_NOT_AVAILABLE",
    "ProductCounters",
    "SETTINGS_SECTIONS",
    "default_settings",
]
