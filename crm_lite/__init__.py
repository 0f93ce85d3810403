"""Single-user customer and inventory tracking with local JSON storage."""

__version__ = "1.0.0"
