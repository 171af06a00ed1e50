"""Collections of timestamps traversed in time order at a chosen frequency."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

from dutils.timestamp import Timestamp


@dataclass
class _Entry:
    timestamp: Timestamp
    index: int


class TimeManager:
    """Stores timestamps with their insertion index and keeps them sortable."""

    def __init__(self):
        self._entries: list[_Entry] = []
        self._is_sorted = True

    def add(self, t: Timestamp) -> None:
        """Append a timestamp; its index is the current number of entries."""
        if not self._entries:
            self._is_sorted = True
        elif self._entries[-1].timestamp > t:
            self._is_sorted = False
        self._entries.append(_Entry(t, len(self._entries)))

    def __getitem__(self, idx: int) -> Timestamp:
        self._sort()
        return self._entries[idx].timestamp

    def __len__(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        """Remove every timestamp."""
        self._entries.clear()
        self._is_sorted = True

    def remove(self, t: Timestamp, decrease_indexes: bool = False) -> None:
        """Remove one entry equal to ``t``.

        With ``decrease_indexes``, the indices greater than the removed one
        are shifted down by one.
        """
        removed_id = -1
        if self._is_sorted:
            pos = bisect.bisect_left(self._entries, t, key=lambda e: e.timestamp)
            if pos < len(self._entries) and self._entries[pos].timestamp == t:
                removed_id = self._entries.pop(pos).index
        else:
            pos = next(
                (i for i, e in enumerate(self._entries) if e.timestamp == t), None
            )
            if pos is not None:
                removed_id = self._entries[pos].index
                self._entries[pos] = self._entries[-1]
                self._entries.pop()

        if removed_id != -1 and decrease_indexes:
            for entry in self._entries:
                if entry.index > removed_id:
                    entry.index -= 1

        if not self._is_sorted:
            self._is_sorted = len(self._entries) <= 1

    def begin(self, frequency: float = 0.0) -> TimeCursor:
        """Cursor on the earliest timestamp."""
        self._sort()
        cursor = TimeCursor(self, frequency)
        if self._entries:
            cursor.index = self._entries[0].index
            cursor.timestamp = self._entries[0].timestamp
        return cursor

    def begin_at(self, t: Timestamp, frequency: float = 0.0) -> TimeCursor:
        """Cursor on the timestamp closest to ``t``."""
        self._sort()
        cursor = TimeCursor(self, frequency)
        if self._entries:
            cursor._set(t)
        return cursor

    def begin_after(self, seconds: float, frequency: float = 0.0) -> TimeCursor:
        """Cursor on the timestamp closest to the first one plus ``seconds``."""
        return self.begin_at(self.first_timestamp() + seconds, frequency)

    def first_timestamp(self) -> Timestamp:
        """Earliest stored timestamp."""
        self._sort()
        if not self._entries:
            raise IndexError("no timestamps stored")
        return self._entries[0].timestamp

    def last_timestamp(self) -> Timestamp:
        """Latest stored timestamp."""
        self._sort()
        if not self._entries:
            raise IndexError("no timestamps stored")
        return self._entries[-1].timestamp

    def _sort(self) -> None:
        if not self._is_sorted:
            self._entries.sort(key=lambda e: e.timestamp)
            self._is_sorted = True


class TimeCursor:
    """Position in a :class:`TimeManager`; ``index`` is -1 past the end."""

    def __init__(self, manager: TimeManager, frequency: float = 0.0):
        self._manager = manager
        self.frequency = frequency
        self.index = -1
        self.timestamp = Timestamp()

    def advance(self) -> None:
        """Move to the next timestamp, one period (or one instant) later."""
        if self.frequency > 0:
            desired = self.timestamp + 1.0 / self.frequency
        else:
            desired = self.timestamp.plus(0, 1)
        self._set(desired, moving_backwards=False)

    def retreat(self) -> None:
        """Move to the previous timestamp, one period (or one instant) earlier."""
        if self.frequency > 0:
            desired = self.timestamp - 1.0 / self.frequency
        else:
            desired = self.timestamp.minus(0, 1)
        self._set(desired, moving_backwards=True)

    def step(self, secs: float) -> None:
        """Move to the timestamp closest to the current one plus ``secs``."""
        self._set(self.timestamp + secs)

    def skip(self, n: int) -> None:
        """Move ``n`` periods forward, or ``n`` entries when no frequency is set."""
        if self.frequency > 0:
            self._set(self.timestamp + n / self.frequency)
            return
        for _ in range(n):
            self._set(self.timestamp.plus(0, 1))
            if self.index == -1:
                break

    def at_end(self) -> bool:
        """True when the cursor has left the sequence."""
        return self.index == -1

    def _set(self, desired: Timestamp, moving_backwards: bool = False) -> None:
        entries = self._manager._entries
        if not entries:
            self.index = -1
            return

        n = len(entries)
        pos = bisect.bisect_left(entries, desired, key=lambda e: e.timestamp)
        if pos == n:
            pass
        elif pos == 0:
            if self.index == entries[0].index:
                pos = n if moving_backwards else 1
        else:
            d1 = entries[pos].timestamp - desired
            d2 = desired - entries[pos - 1].timestamp
            if d2 < d1:
                pos -= 1
            if entries[pos].index == self.index:
                pos = pos - 1 if moving_backwards else pos + 1

        if 0 <= pos < n:
            self.index = entries[pos].index
            self.timestamp = entries[pos].timestamp
        else:
            self.index = -1