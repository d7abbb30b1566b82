"""Order numbers — ``ORD-<epoch-millis>`` from an injected clock.

The generator never hands out the same number twice: when two orders fall
in the same millisecond (or the clock steps backwards) the later one gets
the previous number plus one.

Provides get_number_generator() / set_number_generator() /
reset_number_generator() so tests can pin the clock.
"""

from collections.abc import Callable
from datetime import UTC, datetime

ORDER_NUMBER_PREFIX = "ORD"


def system_clock() -> datetime:
    return datetime.now(UTC)


class OrderNumberGenerator:
    def __init__(self, clock: Callable[[], datetime] = system_clock, prefix: str = ORDER_NUMBER_PREFIX) -> None:
        self.clock = clock
        self.prefix = prefix
        self._last_millis = 0

    def next_number(self) -> str:
        millis = int(self.clock().timestamp() * 1000)
        if millis <= self._last_millis:
            millis = self._last_millis + 1
        self._last_millis = millis
        return f"{self.prefix}-{millis}"


_current_generator: OrderNumberGenerator | None = None


def get_number_generator() -> OrderNumberGenerator:
    """Return the active generator. Defaults to one driven by the system clock."""
    global _current_generator
    if _current_generator is None:
        _current_generator = OrderNumberGenerator()
    return _current_generator


def set_number_generator(generator: OrderNumberGenerator) -> None:
    """Override the active generator (useful for tests)."""
    global _current_generator
    _current_generator = generator


def reset_number_generator() -> None:
    global _current_generator
    _current_generator = None
