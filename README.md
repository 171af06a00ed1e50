# dutils

Small general-purpose utilities, plus helpers for simple computer-vision
tasks that work on numpy arrays.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## General utilities

- `dutils.strings`: `split` (split at any delimiter character, dropping empty
  tokens, with an optional split limit), `remove_from` (cut a string at the
  first unescaped character), `trim`, `replace` and `replace_all`.
- `dutils.timestamp`: `Timestamp` holds seconds and microseconds. It is
  immutable and ordered, and is built with `Timestamp.now()`,
  `Timestamp.from_string("12.5")` or `Timestamp.from_seconds(12.5)`.
  `t + seconds` and `t - seconds` give a new timestamp. `t1 - t2` gives the
  difference in seconds. `format()` gives local date and time.
  `format_duration(seconds)` renders a duration such as `01:02:05`.
- `dutils.linefile`: `LineFile` reads or writes a text file line by line, and
  `FileMode` (`READ`, `WRITE`, `APPEND`) chooses how it is opened. It offers
  `read_line`, `read_all`, `eof` and iteration for reading, and `write_line`
  and `dump` for writing. It works as a context manager. Misuse, such as a
  wrong mode or a closed file, raises `DUtilsError`.
- `dutils.binaryfile`: `BinaryFile` reads and writes chars, 32-bit ints,
  floats and doubles in big-endian byte order. A short read raises `EOFError`.
- `dutils.lut`: `ones_in_byte` and `count_ones` count set bits.
- `dutils.configfile`: `ConfigFile` reads and writes `key = value` files.
  `#` starts a comment unless written `\#`. Quoted values lose their quotes.
  Lines without `=` are stored under `?0`, `?1` and so on. `$(name)` is
  replaced by the value of `name`, and unknown or circular references emit a
  warning. In write mode the entries are written, sorted by key, on `close()`.
- `dutils.timemanager`: `TimeManager` stores timestamps with their insertion
  index. `begin`, `begin_at` and `begin_after` return a `TimeCursor`, which
  moves with `advance`, `retreat`, `step` and `skip`, either at a given
  frequency or entry by entry. `at_end()` tells when the cursor has left the
  sequence.
- `dutils.profiler`: `Profiler` times named sections with `profile` and
  `stop`, or records values with `add`. It reports `mean_time`,
  `stdev_time`, `min_time`, `max_time`, `total_time`, `statistics` and
  `show_statistics`.
- `dutils.randomness`: `seed_rand`, `seed_rand_once` and `random_int`, and
  `UnrepeatedRandomizer`, which draws every integer of a range once before
  refilling it.
- `dutils.fileutils`: `make_dir`, `remove_dir`, `remove_file`, `file_exists`,
  `dir_exists`, `list_dir`, `file_name` and `file_parts`.
- `dutils.debugging`: `memory_usage` reads the process size from `/proc` and
  returns 0 where that is unavailable. `format_bytes` renders byte counts in
  B, KB, MB or GB.

## Matrix and vision helpers

- `dutils.cvtypes`: the `KeyPoint` dataclass, `type_name` (such as `CV_8U` or
  `CV_64F` for single-channel arrays) and `vectorize`.
- `dutils.geometry`: `sq_distance` between two row or column vectors.
- `dutils.matrix`: `remove_rows` returns a copy without the given rows.
- `dutils.transformations`: 4x4 homogeneous transforms built with `rotx`,
  `roty`, `rotz`, `transl` and `rotvec`. It also provides `inv`,
  `compose_rt`, `decompose_rt`, and `rodrigues` for converting between
  rotation vectors and matrices.
- `dutils.matio`: `print_mat`, `print_size` and `print_type` write to a
  stream. `save_keypoints` and `load_keypoints` store keypoints as XML for
  `.xml` files and as YAML otherwise.
- `dutils.drawing`: `draw_line` and `draw_circle` are primitives. `Plot`
  (its canvas is `plot.image`) and `Style` (including `Style.from_char("r")`)
  plot data. Further functions are `draw_keypoints`,
  `draw_correspondences`, `project_points`, `draw_reference_system`,
  `draw_reference_system_rt`, `draw_box` and `draw_box_homography`.
  `save_keypoint_image` and `save_correspondence_image` write files with
  Pillow. Colours are in blue-green-red order, and drawing modifies the
  given array in place.

## Example

```python
from dutils.timestamp import Timestamp, format_duration
from dutils.profiler import Profiler
from dutils.transformations import rotz, transl, inv

t = Timestamp.from_string("12.5")
print((t + 1.25).to_string())        # 13.750000
print(format_duration(3725.0))       # 01:02:05

prof = Profiler()
prof.add(0.2, "step")
prof.add(0.4, "step")
print(prof.mean_time("step"))

T = transl(1, 2, 3) @ rotz(0.5)
print(inv(T) @ T)                    # identity
```

## What it does not do

The package has no command-line program. It does not open windows, show
images on screen or handle mouse input. It only draws into arrays and saves
image files. It has no general-purpose serialisation of arbitrary objects
into storage files: only keypoints can be saved and loaded.