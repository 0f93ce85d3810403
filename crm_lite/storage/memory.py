"""In-memory key-value store for tests and throwaway sessions."""

from crm_lite.storage.base import KeyValueStore


class MemoryStore(KeyValueStore):
    """Keep blobs in a dict for the lifetime of the process."""

    def __init__(self, pretty: bool = False) -> None:
        super().__init__(pretty=pretty)
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> list[str]:
        return list(self._data)
