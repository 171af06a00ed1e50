import io

import pytest

from dutils.profiler import Profiler


def _with_values(name, *values):
    prof = Profiler()
    for v in values:
        prof.add(v, name)
    return prof


def test_basic_statistics_from_added_values():
    prof = _with_values("a", 1.0, 3.0, 2.0)
    assert prof.mean_time("a") == pytest.approx(2.0)
    assert prof.min_time("a") == 1.0
    assert prof.max_time("a") == 3.0
    assert prof.total_time("a") == pytest.approx(6.0)
    assert prof.back("a") == 2.0
    assert prof.times("a") == [1.0, 3.0, 2.0]


def test_statistics_tuple_matches_individual_getters():
    prof = _with_values("a", 4.0, 1.0, 7.0, 2.0)
    st = prof.statistics("a")
    assert st.mean == pytest.approx(prof.mean_time("a"))
    assert st.stdev == pytest.approx(prof.stdev_time("a"))
    assert (st.min, st.max) == (prof.min_time("a"), prof.max_time("a"))


def test_stdev_is_zero_for_constant_and_single_values():
    assert _with_values("a", 5.0, 5.0, 5.0).stdev_time("a") == 0.0
    assert _with_values("a", 5.0).stdev_time("a") == 0.0
    assert _with_values("a", 1.0, 9.0).stdev_time("a") > 0.0


def test_unknown_name_gives_zeros():
    prof = Profiler()
    assert prof.mean_time("x") == 0.0
    assert prof.max_time("x") == 0.0
    assert prof.back("x") == 0.0
    assert prof.times("x") == []
    assert tuple(prof.statistics("x")) == (0.0, 0.0, 0.0, 0.0)


def test_entry_names_sorted():
    prof = Profiler()
    prof.add(1.0, "zeta")
    prof.add(1.0, "alpha")
    assert prof.entry_names() == ["alpha", "zeta"]


def test_reset_keeps_entry_but_clears_values():
    prof = _with_values("a", 1.0, 2.0)
    prof.reset("a")
    assert prof.times("a") == []
    assert prof.entry_names() == ["a"]
    assert prof.mean_time("a") == 0.0


def test_profile_and_stop_records_duration():
    prof = Profiler()
    prof.profile("work")
    prof.stop("work")
    times = prof.times("work")
    assert len(times) == 1
    assert times[0] >= 0.0


def test_stop_without_name_uses_last_profile():
    prof = Profiler()
    prof.profile("first")
    prof.profile("second")
    prof.stop()
    assert prof.entry_names() == ["second"]


def test_stop_unknown_timer_records_nothing():
    prof = Profiler()
    prof.stop("never")
    assert prof.entry_names() == []


def test_stop_twice_records_once():
    prof = Profiler()
    prof.profile("x")
    prof.stop_and_scale(Profiler.MS, "x")
    prof.stop_and_scale(Profiler.MS, "x")
    assert len(prof.times("x")) == 1


def test_show_statistics_format():
    prof = _with_values("x", 2.0, 2.0)
    out = io.StringIO()
    prof.show_statistics("x", "ms", 1000.0, out)
    assert out.getvalue() == "x: 2000 +/- 0 ms (2000 .. 2000)\n"


def test_show_statistics_without_name_has_no_prefix():
    prof = _with_values("", 3.0)
    out = io.StringIO()
    prof.show_statistics("", "s", 1.0, out)
    assert out.getvalue() == "3 +/- 0 s (3 .. 3)\n"