"""Tests for the cart storage port, its adapters and the factory."""

import pytest
from ordering.cart.storage import get_storage, reset_storage, set_storage
from ordering.cart.storage.file_adapter import FileStorage
from ordering.cart.storage.memory_adapter import MemoryStorage
from ordering.cart.storage.port import StorageError


class TestMemoryStorage:
    def test_round_trip_and_delete(self):
        storage = MemoryStorage()
        storage.set("k", "v")
        assert storage.get("k") == "v"
        storage.delete("k")
        assert storage.get("k") is None

    def test_records_calls(self):
        storage = MemoryStorage()
        storage.get("k")
        storage.set("k", "v")
        assert storage.calls == [{"method": "get", "key": "k"}, {"method": "set", "key": "k"}]

    def test_configured_failure_raises_storage_error(self):
        storage = MemoryStorage()
        storage.configure(should_fail=True)
        with pytest.raises(StorageError):
            storage.set("k", "v")


class TestFileStorage:
    def test_missing_key_reads_none(self, tmp_path):
        assert FileStorage(tmp_path).get("shopping-cart") is None

    def test_set_creates_directory_and_file(self, tmp_path):
        storage = FileStorage(tmp_path / "carts")
        storage.set("shopping-cart", "[]")
        assert (tmp_path / "carts" / "shopping-cart.json").read_text() == "[]"
        assert storage.get("shopping-cart") == "[]"

    def test_set_overwrites_previous_snapshot(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set("shopping-cart", "[1]")
        storage.set("shopping-cart", "[2]")
        assert storage.get("shopping-cart") == "[2]"
        assert not list(tmp_path.glob("*.tmp"))

    def test_unsafe_key_characters_are_replaced(self, tmp_path):
        storage = FileStorage(tmp_path)
        storage.set("../escape", "x")
        assert (tmp_path / ".._escape.json").exists()

    def test_delete_missing_key_is_fine(self, tmp_path):
        FileStorage(tmp_path).delete("shopping-cart")

    def test_unwritable_location_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        with pytest.raises(StorageError):
            FileStorage(blocker / "carts").set("shopping-cart", "[]")


class TestStorageFactory:
    def test_defaults_to_memory(self, monkeypatch):
        monkeypatch.delenv("CART_STORAGE", raising=False)
        reset_storage()
        assert isinstance(get_storage(), MemoryStorage)

    def test_returns_singleton(self):
        assert get_storage() is get_storage()

    def test_file_backend_from_environment(self, monkeypatch, tmp_path):
        monkeypatch.setenv("CART_STORAGE", "file")
        monkeypatch.setenv("CART_STORAGE_DIR", str(tmp_path))
        reset_storage()
        storage = get_storage()
        assert isinstance(storage, FileStorage)
        assert storage.base_dir == tmp_path

    def test_unknown_backend_is_rejected(self, monkeypatch):
        monkeypatch.setenv("CART_STORAGE", "redis")
        reset_storage()
        with pytest.raises(ValueError):
            get_storage()

    def test_set_storage_overrides(self):
        storage = MemoryStorage()
        set_storage(storage)
        assert get_storage() is storage
