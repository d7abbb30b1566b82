"""Cart storage factory.

Provides get_storage() / set_storage() / reset_storage() to swap backends:
- MemoryStorage for development and testing (default)
- FileStorage for a single-process deployment

The default backend is chosen by the CART_STORAGE environment variable
(``memory`` or ``file``); FileStorage writes under CART_STORAGE_DIR.
"""

import os

from ordering.cart.storage.port import CartStorage, StorageError

_current_storage: CartStorage | None = None


def get_storage() -> CartStorage:
    """Return the configured cart storage (singleton)."""
    global _current_storage
    if _current_storage is None:
        backend = os.environ.get("CART_STORAGE", "memory")
        if backend == "memory":
            from ordering.cart.storage.memory_adapter import MemoryStorage

            _current_storage = MemoryStorage()
        elif backend == "file":
            from ordering.cart.storage.file_adapter import FileStorage

            _current_storage = FileStorage(os.environ.get("CART_STORAGE_DIR", ".cart"))
        else:
            raise ValueError(f"Unknown cart storage backend: {backend}")
    return _current_storage


def set_storage(storage: CartStorage) -> None:
    """Override the active cart storage (useful for tests)."""
    global _current_storage
    _current_storage = storage


def reset_storage() -> None:
    """Reset to the default backend."""
    global _current_storage
    _current_storage = None


__all__ = ["CartStorage", "StorageError", "get_storage", "reset_storage", "set_storage"]
