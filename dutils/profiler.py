"""Named timers that collect durations and report their statistics."""

from __future__ import annotations

import statistics
import sys
import time
from typing import NamedTuple, TextIO


class Statistics(NamedTuple):
    mean: float
    stdev: float
    min: float
    max: float


def _stdev(values: list[float], mean: float | None = None) -> float:
    if len(values) <= 1:
        return 0.0
    return statistics.stdev(values, mean)


class Profiler:
    """Measures named code sections; durations are stored in seconds."""

    MS = 1e3
    SECONDS = 1.0

    def __init__(self):
        self._start_points: dict[str, float] = {}
        self._profiles: dict[str, list[float]] = {}
        self._last_profile = ""

    def profile(self, name: str = "") -> None:
        """Start (or restart) the timer ``name``."""
        self._last_profile = name
        self._start_points[name] = time.perf_counter()

    def stop(self, name: str = "") -> None:
        """Stop a timer and record its duration in seconds."""
        self.stop_and_scale(1.0, name)

    def stop_and_scale(self, scale: float, name: str = "") -> None:
        """Stop a timer (the last started one if ``name`` is empty) and record
        its duration multiplied by ``scale``."""
        now = time.perf_counter()
        key = name or self._last_profile
        start = self._start_points.pop(key, None)
        if start is not None:
            self._profiles.setdefault(key, []).append((now - start) * scale)

    def add(self, value: float, name: str = "") -> None:
        """Record a value under ``name`` without timing anything."""
        self._profiles.setdefault(name, []).append(value)

    def mean_time(self, name: str = "") -> float:
        values = self._profiles.get(name)
        return statistics.fmean(values) if values else 0.0

    def stdev_time(self, name: str = "") -> float:
        return _stdev(self._profiles.get(name, []))

    def min_time(self, name: str = "") -> float:
        values = self._profiles.get(name)
        return min(values) if values else 0.0

    def max_time(self, name: str = "") -> float:
        values = self._profiles.get(name)
        return max(values) if values else 0.0

    def total_time(self, name: str = "") -> float:
        return sum(self._profiles.get(name, []))

    def statistics(self, name: str = "") -> Statistics:
        """Mean, standard deviation, minimum and maximum of ``name``."""
        values = self._profiles.get(name)
        if not values:
            return Statistics(0.0, 0.0, 0.0, 0.0)
        mean = statistics.fmean(values)
        return Statistics(mean, _stdev(values, mean), min(values), max(values))

    def show_statistics(
        self,
        name: str = "",
        suffix: str = "s",
        scale: float = 1.0,
        out: TextIO | None = None,
    ) -> None:
        """Write ``name: mean +/- stdev suffix (min .. max)`` to ``out``."""
        out = sys.stdout if out is None else out
        st = self.statistics(name)
        prefix = f"{name}: " if name else ""
        out.write(
            f"{prefix}{st.mean * scale:g} +/- {st.stdev * scale:g} {suffix}"
            f" ({st.min * scale:g} .. {st.max * scale:g})\n"
        )

    def times(self, name: str = "") -> list[float]:
        """Copy of every value recorded under ``name``."""
        return list(self._profiles.get(name, []))

    def back(self, name: str = "") -> float:
        """Last value recorded under ``name``, or 0."""
        values = self._profiles.get(name)
        return values[-1] if values else 0.0

    def reset(self, name: str = "") -> None:
        """Forget the values of ``name`` while keeping the entry."""
        if name in self._profiles:
            self._profiles[name].clear()

    def entry_names(self) -> list[str]:
        """Names with recorded values, in ascending order."""
        return sorted(self._profiles)