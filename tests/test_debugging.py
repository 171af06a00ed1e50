from dutils.debugging import format_bytes, memory_usage


def test_memory_usage_non_negative():
    assert memory_usage() >= 0


def test_format_small_bytes():
    assert format_bytes(512) == "512 B"


def test_format_kilobytes():
    assert format_bytes(2048) == "2 KB"


def test_format_custom_factor():
    assert format_bytes(1500, 1000) == "1.5 KB"


def test_suffix_grows_with_size():
    assert format_bytes(1024**2).endswith(" MB")
    assert format_bytes(1024**3).endswith(" GB")
    assert format_bytes(1024**4 * 3).endswith(" GB")


def test_below_factor_is_bytes():
    assert format_bytes(999, 1000).endswith(" B")
    assert format_bytes(1000, 1000).endswith(" KB")