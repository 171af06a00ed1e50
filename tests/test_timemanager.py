import pytest

from dutils.timemanager import TimeManager
from dutils.timestamp import Timestamp


def _ts(seconds):
    return Timestamp.from_seconds(seconds)


def _manager(*seconds):
    tm = TimeManager()
    for s in seconds:
        tm.add(_ts(s))
    return tm


def _walk(cursor):
    visited = []
    while not cursor.at_end():
        visited.append(cursor.index)
        cursor.advance()
    return visited


def test_indexing_returns_sorted_timestamps():
    tm = _manager(3.0, 1.0, 2.0)
    assert [tm[i] for i in range(len(tm))] == [_ts(1.0), _ts(2.0), _ts(3.0)]


def test_first_and_last():
    tm = _manager(5.0, 2.0, 9.0)
    assert tm.first_timestamp() == _ts(2.0)
    assert tm.last_timestamp() == _ts(9.0)


def test_first_on_empty_raises():
    with pytest.raises(IndexError):
        TimeManager().first_timestamp()


def test_clear():
    tm = _manager(1.0, 2.0)
    tm.clear()
    assert len(tm) == 0
    assert tm.begin().at_end()


def test_walk_visits_in_time_order_with_insertion_indices():
    tm = _manager(3.0, 1.0, 2.0)
    assert _walk(tm.begin()) == [1, 2, 0]


def test_walk_with_frequency():
    tm = _manager(1.0, 2.0, 3.0)
    assert _walk(tm.begin(frequency=1.0)) == [0, 1, 2]


def test_retreat_goes_back_and_leaves_at_start():
    tm = _manager(1.0, 2.0, 3.0)
    cursor = tm.begin()
    cursor.advance()
    cursor.advance()
    assert cursor.index == 2
    cursor.retreat()
    assert cursor.index == 1
    assert cursor.timestamp == _ts(2.0)
    cursor.retreat()
    cursor.retreat()
    assert cursor.at_end()


def test_begin_at_picks_closest():
    tm = _manager(1.0, 2.0, 3.0)
    cursor = tm.begin_at(_ts(2.2))
    assert cursor.index == 1
    assert cursor.timestamp == _ts(2.0)


def test_begin_after_offsets_from_first():
    tm = _manager(10.0, 11.0, 12.0)
    cursor = tm.begin_after(2.0)
    assert cursor.timestamp == _ts(12.0)


def test_step_moves_by_seconds():
    tm = _manager(1.0, 2.0, 3.0, 4.0)
    cursor = tm.begin()
    cursor.step(2.0)
    assert cursor.timestamp == _ts(3.0)


def test_skip_without_frequency_counts_entries():
    tm = _manager(1.0, 2.0, 3.0, 4.0)
    cursor = tm.begin()
    cursor.skip(2)
    assert cursor.index == 2
    cursor.skip(5)
    assert cursor.at_end()


def test_skip_with_frequency():
    tm = _manager(1.0, 2.0, 3.0, 4.0)
    cursor = tm.begin(frequency=1.0)
    cursor.skip(3)
    assert cursor.timestamp == _ts(4.0)


def test_remove_sorted_with_index_decrease():
    tm = _manager(1.0, 2.0, 3.0)
    tm.remove(_ts(2.0), decrease_indexes=True)
    assert len(tm) == 2
    assert _walk(tm.begin()) == [0, 1]


def test_remove_without_index_decrease_keeps_indices():
    tm = _manager(1.0, 2.0, 3.0)
    tm.remove(_ts(2.0))
    assert _walk(tm.begin()) == [0, 2]


def test_remove_unsorted():
    tm = _manager(3.0, 1.0, 2.0)
    tm.remove(_ts(1.0))
    assert [tm[0], tm[1]] == [_ts(2.0), _ts(3.0)]


def test_remove_absent_is_noop():
    tm = _manager(1.0, 2.0)
    tm.remove(_ts(7.0), decrease_indexes=True)
    assert len(tm) == 2
    assert _walk(tm.begin()) == [0, 1]