"""JSON file store: one file per key inside a data directory."""

import os
from pathlib import Path

from crm_lite.exceptions import StorageError
from crm_lite.storage.base import KeyValueStore


class JsonFileStore(KeyValueStore):
    """Persist each key as ``<key>.json`` under ``data_dir``."""

    SUFFIX = ".json"

    def __init__(self, data_dir: str | Path, pretty: bool = False) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        data_dir : str | Path
            Directory holding the blob files. Created if missing.
        pretty : bool
            Pretty-print JSON output.
        """
        super().__init__(pretty=pretty)
        self.data_dir = Path(data_dir)
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"Cannot create data directory {self.data_dir}: {e}") from e

    def _path(self, key: str) -> Path:
        return self.data_dir / f"{key}{self.SUFFIX}"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            raise StorageError(f"Cannot read {path}: {e}") from e

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_name(path.name + ".tmp")
        try:
            with open(tmp, "w", encoding="utf-8") as f:
                f.write(value)
            os.replace(tmp, path)
        except OSError as e:
            raise StorageError(f"Cannot write {path}: {e}") from e

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)

    def keys(self) -> list[str]:
        return sorted(p.stem for p in self.data_dir.glob(f"*{self.SUFFIX}"))
