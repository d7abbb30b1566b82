"""In-memory cart storage for development and testing.

Keeps values in a plain dict and records every call, so tests can assert on
what the cart wrote. Can be switched into a failing mode to exercise the
cart's degraded-storage handling.
"""

from ordering.cart.storage.port import CartStorage, StorageError


class MemoryStorage(CartStorage):
    """Dict-backed cart storage."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(initial or {})
        self.should_fail: bool = False
        self.calls: list[dict] = []

    def configure(self, should_fail: bool) -> None:
        """Make subsequent calls fail (or succeed again)."""
        self.should_fail = should_fail

    def _record(self, method: str, key: str) -> None:
        self.calls.append({"method": method, "key": key})
        if self.should_fail:
            raise StorageError(f"Storage unavailable for {method}({key!r})")

    def get(self, key: str) -> str | None:
        self._record("get", key)
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self._record("set", key)
        self.values[key] = value

    def delete(self, key: str) -> None:
        self._record("delete", key)
        self.values.pop(key, None)
