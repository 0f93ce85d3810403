"""Settings store: nested configuration blob with first-run defaults."""

import copy
import logging
from typing import Any, Mapping

from crm_lite.exceptions import DuplicateError, NotFoundError, StorageError, ValidationError
from crm_lite.models import SETTINGS_SECTIONS, default_settings
from crm_lite.store.state import DomainState

logger = logging.getLogger(__name__)


class SettingsStore:
    """Read and edit the settings blob of a ``DomainState``."""

    def __init__(self, state: DomainState) -> None:
        self.state = state

    def load(self) -> dict[str, Any]:
        """Return current settings, writing defaults first on a first run."""
        if self.state.settings is None:
            self.state.settings = default_settings()
            self.state.save_settings()
            logger.info("Initialized default settings")
        return self.state.settings

    def _apply(self, settings: dict[str, Any]) -> None:
        """Swap in a modified copy and save, keeping the old one on failure."""
        previous = self.state.settings
        self.state.settings = settings
        try:
            self.state.save_settings()
        except StorageError:
            self.state.settings = previous
            raise

    def patch(self, section: str, value: Mapping[str, Any]) -> dict[str, Any]:
        """Replace one top-level section wholesale."""
        if section not in SETTINGS_SECTIONS:
            raise ValidationError(f"Unknown settings section: {section!r}")
        if not isinstance(value, Mapping):
            raise ValidationError(f"Settings section {section} must be a mapping")

        settings = copy.deepcopy(self.load())
        settings[section] = dict(value)
        self._apply(settings)
        logger.info("Saved %s settings", section)
        return self.state.settings

    def categories(self) -> list[str]:
        return list(self.load().get("categories", []))

    def add_category(self, name: str) -> list[str]:
        name = (name or "").strip()
        if not name:
            raise ValidationError("Please enter a category name")

        categories = self.categories()
        if name in categories:
            raise DuplicateError(f"Category {name} already exists")

        self._replace_categories(categories + [name])
        logger.info("Added category %s", name)
        return self.categories()

    def rename_category(self, old_name: str, new_name: str) -> list[str]:
        categories = self.categories()
        if old_name not in categories:
            raise NotFoundError(f"Category {old_name} not found")
        new_name = (new_name or "").strip()
        if not new_name:
            raise ValidationError("Please enter a category name")

        categories[categories.index(old_name)] = new_name
        self._replace_categories(categories)
        logger.info("Renamed category %s to %s", old_name, new_name)
        return self.categories()

    def remove_category(self, name: str) -> list[str]:
        categories = self.categories()
        if name not in categories:
            raise NotFoundError(f"Category {name} not found")

        categories.remove(name)
        self._replace_categories(categories)
        logger.info("Removed category %s", name)
        return self.categories()

    def _replace_categories(self, categories: list[str]) -> None:
        settings = copy.deepcopy(self.load())
        settings["categories"] = categories
        self._apply(settings)

    def reset(self) -> dict[str, Any]:
        """Restore the first-run defaults."""
        self._apply(default_settings())
        logger.info("Settings reset to defaults")
        return self.state.settings
