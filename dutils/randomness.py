"""Pseudo-random integers and draws without repetition."""

from __future__ import annotations

import random
import time

_rng = random.Random()
_already_seeded = False


def seed_rand(seed: int | None = None) -> None:
    """Seed the generator with ``seed``, or with the current time when omitted."""
    if seed is None:
        seed = int(time.time())
    _rng.seed(seed)


def seed_rand_once(seed: int | None = None) -> None:
    """Seed the generator only if no previous call to this function seeded it."""
    global _already_seeded
    if not _already_seeded:
        seed_rand(seed)
        _already_seeded = True


def random_int(min_value: int, max_value: int) -> int:
    """Random integer in ``[min_value, max_value]``."""
    span = max_value - min_value + 1
    return int(_rng.random() * span) + min_value


class UnrepeatedRandomizer:
    """Draws every integer of a closed range once before any repeats.

    When all values have been drawn, the range is refilled automatically.
    """

    def __init__(self, low: int, high: int):
        self.low, self.high = (low, high) if low <= high else (high, low)
        self._values: list[int] = []
        self._create_values()

    def _create_values(self) -> None:
        self._values = list(range(self.low, self.high + 1))

    def get(self) -> int:
        """Draw a value not drawn since the last refill."""
        if self.empty():
            self._create_values()
        seed_rand_once()
        k = random_int(0, len(self._values) - 1)
        value = self._values[k]
        self._values[k] = self._values[-1]
        self._values.pop()
        return value

    def reset(self) -> None:
        """Make every value of the range available again."""
        if len(self._values) != self.high - self.low + 1:
            self._create_values()

    def empty(self) -> bool:
        """True when every value has been drawn."""
        return not self._values

    def __len__(self) -> int:
        return len(self._values)