"""Local key-value stores holding the serialized blobs."""

from crm_lite.storage.base import KeyValueStore
from crm_lite.storage.json_file import JsonFileStore
from crm_lite.storage.memory import MemoryStore

CUSTOMERS_KEY = "crm_customers"
PRODUCTS_KEY = "crm_products"
SETTINGS_KEY = "crm_settings"

__all__ = [
    "CUSTOMERS_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "PRODUCTS_KEY",
    "SETTINGS_KEY",
]
