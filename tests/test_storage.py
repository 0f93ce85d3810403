"""Tests for key-value stores."""

import json
from pathlib import Path

import pytest

from crm_lite.exceptions import StorageError
from crm_lite.storage import JsonFileStore, MemoryStore


class TestMemoryStore:
    """Tests for MemoryStore."""

    def test_get_missing(self) -> None:
        assert MemoryStore().get("crm_customers") is None

    def test_set_get_remove(self) -> None:
        kv = MemoryStore()
        kv.set("crm_products", "{}")

        assert kv.get("crm_products") == "{}"
        assert kv.keys() == ["crm_products"]

        kv.remove("crm_products")
        assert kv.get("crm_products") is None

    def test_remove_missing_is_noop(self) -> None:
        MemoryStore().remove("nothing")

    def test_clear(self) -> None:
        kv = MemoryStore()
        kv.set("a", "1")
        kv.set("b", "2")

        kv.clear()

        assert kv.keys() == []

    def test_blob_roundtrip(self) -> None:
        kv = MemoryStore()
        kv.write_blob("crm_customers", [{"id": "1", "name": "Zoë"}])

        assert kv.read_blob("crm_customers") == [{"id": "1", "name": "Zoë"}]
        assert "Zoë" in kv.get("crm_customers")

    def test_read_blob_missing(self) -> None:
        assert MemoryStore().read_blob("crm_settings") is None

    def test_read_blob_invalid_json(self) -> None:
        kv = MemoryStore()
        kv.set("crm_settings", "{not json")

        with pytest.raises(StorageError, match="crm_settings"):
            kv.read_blob("crm_settings")

    def test_pretty_output(self) -> None:
        kv = MemoryStore(pretty=True)
        kv.write_blob("crm_products", {"total": 1})

        assert "\n" in kv.get("crm_products")


class TestJsonFileStore:
    """Tests for JsonFileStore."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        data_dir = tmp_path / "nested" / "data"
        JsonFileStore(data_dir)

        assert data_dir.is_dir()

    def test_write_blob_creates_file(self, tmp_path: Path) -> None:
        kv = JsonFileStore(tmp_path)
        kv.write_blob("crm_products", {"total": 10, "sold": 2})

        path = tmp_path / "crm_products.json"
        assert path.exists()
        assert json.loads(path.read_text(encoding="utf-8")) == {"total": 10, "sold": 2}
        assert not (tmp_path / "crm_products.json.tmp").exists()

    def test_read_back_from_new_instance(self, tmp_path: Path) -> None:
        JsonFileStore(tmp_path).write_blob("crm_customers", [{"id": "1"}])

        assert JsonFileStore(tmp_path).read_blob("crm_customers") == [{"id": "1"}]

    def test_overwrite(self, tmp_path: Path) -> None:
        kv = JsonFileStore(tmp_path)
        kv.set("crm_settings", '{"a": 1}')
        kv.set("crm_settings", '{"a": 2}')

        assert kv.read_blob("crm_settings") == {"a": 2}

    def test_keys_and_clear(self, tmp_path: Path) -> None:
        kv = JsonFileStore(tmp_path)
        kv.set("crm_customers", "[]")
        kv.set("crm_products", "{}")
        (tmp_path / "notes.txt").write_text("keep me", encoding="utf-8")

        assert kv.keys() == ["crm_customers", "crm_products"]

        kv.clear()

        assert kv.keys() == []
        assert (tmp_path / "notes.txt").exists()

    def test_get_missing(self, tmp_path: Path) -> None:
        assert JsonFileStore(tmp_path).get("crm_customers") is None

    def test_write_failure_raises_storage_error(self, tmp_path: Path) -> None:
        kv = JsonFileStore(tmp_path)
        # A directory in the way of the target file makes os.replace fail
        (tmp_path / "crm_products.json").mkdir()

        with pytest.raises(StorageError, match="Cannot write"):
            kv.set("crm_products", "{}")

    def test_unusable_data_dir_raises_storage_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(StorageError, match="Cannot create data directory"):
            JsonFileStore(blocker / "data")
