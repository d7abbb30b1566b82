"""Cart storage port (abstract interface).

The cart persists one JSON snapshot under a fixed key. Any backend that can
get, set and delete a string value by key can hold it: an in-memory map for
tests, a JSON file directory for a single-process deployment.
"""

from abc import ABC, abstractmethod


class StorageError(Exception):
    """The storage backend could not complete a read or write."""


class CartStorage(ABC):
    """Abstract key-value storage for cart snapshots."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        """Return the value stored under ``key``, or None if nothing is stored."""
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        ...

    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is not an error."""
        ...
