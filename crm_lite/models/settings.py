"""Default application settings."""

from typing import Any

DEFAULT_CATEGORIES = ["Regular", "VIP", "Premium", "Wholesale", "Corporate"]

# Top-level sections replaceable as a whole; categories have their own operations
SETTINGS_SECTIONS = (
    "company",
    "localization",
    "fields",
    "notifications",
    "security",
    "backup",
    "performance",
    "developer",
    "export",
    "import",
)


def default_settings() -> dict[str, Any]:
    """Return a fresh copy of the first-run settings."""
    return {
        "company": {
            "name": "",
            "address": "",
            "phone": "",
            "email": "",
        },
        "localization": {
            "language": "en",
            "currency": "USD",
            "timezone": "UTC",
        },
        "categories": list(DEFAULT_CATEGORIES),
        "fields": {
            "notes": True,
            "tags": True,
            "birthday": False,
            "socialMedia": False,
        },
        "notifications": {
            "email": True,
            "browser": True,
            "lowStock": False,
            "birthday": False,
        },
        "security": {
            "sessionTimeout": 30,
            "maxLoginAttempts": 5,
            "dataEncryption": True,
            "auditLog": True,
        },
        "backup": {
            "autoBackup": "weekly",
            "retention": 30,
        },
        "performance": {
            "cacheSize": 100,
            "maxSearchResults": 100,
            "lazyLoading": True,
            "compression": True,
        },
        "developer": {
            "debugMode": False,
            "consoleLogs": False,
            "performanceMonitoring": False,
        },
        "export": {
            "format": "json",
            "encoding": "utf8",
        },
        "import": {
            "validation": "moderate",
            "duplicateHandling": "skip",
        },
    }
