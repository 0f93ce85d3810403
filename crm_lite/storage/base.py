"""Base class for key-value stores."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from typing import Any

from crm_lite.exceptions import StorageError

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """String-keyed store of serialized text documents.

    Subclasses implement raw text access; ``read_blob`` and ``write_blob``
    add JSON encoding on top.

    Parameters
    ----------
    pretty : bool
        Indent JSON written through ``write_blob``.
    """

    def __init__(self, pretty: bool = False) -> None:
        self.pretty = pretty

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the raw text stored under ``key``, or None."""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store raw text under ``key``, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key`` if present."""

    @abstractmethod
    def keys(self) -> list[str]:
        """Return all stored keys."""

    def clear(self) -> None:
        """Delete every key."""
        for key in self.keys():
            self.remove(key)

    def read_blob(self, key: str) -> Any | None:
        """Read and decode the JSON document under ``key``."""
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise StorageError(f"Blob {key} is not valid JSON: {e}") from e

    def write_blob(self, key: str, data: Any) -> None:
        """Encode ``data`` as JSON and store it under ``key``."""
        if self.pretty:
            raw = json.dumps(data, indent=2, ensure_ascii=False)
        else:
            raw = json.dumps(data, ensure_ascii=False)
        self.set(key, raw)
        logger.debug("Wrote blob %s (%d chars)", key, len(raw))
