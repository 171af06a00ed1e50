"""Timestamps with microsecond resolution."""

from __future__ import annotations

import math
import re
import time
from dataclasses import dataclass

_USECS_PER_SEC = 1_000_000
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atol(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in time as whole seconds plus microseconds."""

    secs: int = 0
    usecs: int = 0

    @classmethod
    def now(cls) -> Timestamp:
        """Return the current wall-clock time."""
        ns = time.time_ns()
        return cls(ns // 1_000_000_000, (ns % 1_000_000_000) // 1000)

    @classmethod
    def from_string(cls, text: str) -> Timestamp:
        """Parse ``"secs"`` or ``"secs.fraction"``."""
        if "." not in text:
            return cls(_atol(text), 0)
        head, tail = text.split(".", 1)
        fraction = tail[:6]
        return cls(_atol(head), _atol(tail) * 10 ** (6 - len(fraction)))

    @classmethod
    def from_seconds(cls, seconds: float) -> Timestamp:
        """Build a timestamp from a number of seconds."""
        whole = int(seconds)
        return cls(whole, int((seconds - whole) * 1e6))

    def is_empty(self) -> bool:
        """True when both seconds and microseconds are zero."""
        return self.secs == 0 and self.usecs == 0

    def to_float(self) -> float:
        """Seconds as a float."""
        return float(self.secs) + float(self.usecs) / 1e6

    def to_string(self) -> str:
        """Seconds with six decimal places."""
        return f"{self.to_float():.6f}"

    def plus(self, secs: int, usecs: int) -> Timestamp:
        """Return this time moved forward by ``secs`` and ``usecs``."""
        total = self.usecs + usecs
        if total >= _USECS_PER_SEC:
            return Timestamp(self.secs + secs + 1, total - _USECS_PER_SEC)
        return Timestamp(self.secs + secs, total)

    def minus(self, secs: int, usecs: int) -> Timestamp:
        """Return this time moved backward by ``secs`` and ``usecs``."""
        if self.usecs < usecs:
            return Timestamp(
                self.secs - secs - 1, _USECS_PER_SEC - (usecs - self.usecs)
            )
        return Timestamp(self.secs - secs, self.usecs - usecs)

    @staticmethod
    def _split_seconds(seconds: float) -> tuple[int, int]:
        whole = math.floor(seconds)
        return whole, int((seconds - whole) * 1e6)

    def __add__(self, seconds: float) -> Timestamp:
        if isinstance(seconds, Timestamp) or not isinstance(seconds, (int, float)):
            return NotImplemented
        return self.plus(*self._split_seconds(seconds))

    def __sub__(self, other):
        """Difference in seconds with a timestamp, or a shifted timestamp."""
        if isinstance(other, Timestamp):
            return self.to_float() - other.to_float()
        if isinstance(other, (int, float)):
            return self.minus(*self._split_seconds(other))
        return NotImplemented

    def format(self, machine_friendly: bool = False) -> str:
        """Local date and time, either ``YYYYmmdd_HHMMSS`` or the locale form."""
        local = time.localtime(int(self.to_float()))
        pattern = "%Y%m%d_%H%M%S" if machine_friendly else "%c"
        return time.strftime(pattern, local)


def format_duration(seconds: float) -> str:
    """Render a duration as ``[Nd ][HH:][MM:]SS`` or ``S.uuuuuu`` when short."""
    s = seconds
    days = int(s / (24.0 * 3600.0))
    s -= days * (24.0 * 3600.0)
    hours = int(s / 3600.0)
    s -= hours * 3600
    minutes = int(s / 60.0)
    s -= minutes * 60
    whole = int(s)
    micro = int((s - whole) * 1e6)

    parts: list[str] = []
    shown = days > 0
    if shown:
        parts.append(f"{days}d ")
    shown = shown or hours > 0
    if shown:
        parts.append(f"{hours:02d}:")
    shown = shown or minutes > 0
    if shown:
        parts.append(f"{minutes:02d}:")
        parts.append(f"{whole:02d}")
    else:
        parts.append(f"{whole}.{micro:06d}")
    return "".join(parts)