"""Printing matrices and storing keypoints in YAML or XML storage files."""

from __future__ import annotations

import os
import re
import sys
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from typing import TextIO

import numpy as np

from dutils.cvtypes import KeyPoint, type_name

_FIELDS_PER_KEYPOINT = 7


def _as_2d(m) -> np.ndarray:
    m = np.asarray(m)
    if m.ndim == 0:
        return m.reshape(1, 1)
    if m.ndim == 1:
        return m.reshape(-1, 1)
    return m


def _channels(m: np.ndarray) -> int:
    return 1 if m.ndim <= 2 else int(np.prod(m.shape[2:]))


def _format_value(value) -> str:
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(int(value))


def print_mat(m, name: str = "", out: TextIO | None = None) -> None:
    """Write the elements of a single-channel matrix, one row per line.

    Matrices of unsupported element types print nothing.
    """
    out = sys.stdout if out is None else out
    m = _as_2d(m)
    if not type_name(m):
        return
    if name:
        out.write(f"{name} = ")
    out.write("[ \n")
    for row in m:
        out.write("".join(f"{_format_value(v)} " for v in row.tolist()))
        out.write("\n")
    out.write("]\n")


def print_size(m, name: str = "", out: TextIO | None = None) -> None:
    """Write ``rows x cols`` (and ``x channels`` when there are several)."""
    out = sys.stdout if out is None else out
    m = _as_2d(m)
    if name:
        out.write(f"{name}: ")
    rows, cols = m.shape[0], m.shape[1]
    channels = _channels(m)
    if channels == 1:
        out.write(f"{rows} x {cols}\n")
    else:
        out.write(f"{rows} x {cols} x {channels}\n")


def print_type(m, name: str = "", out: TextIO | None = None) -> None:
    """Write the readable element type of a matrix."""
    out = sys.stdout if out is None else out
    if name:
        out.write(f"{name}: ")
    out.write(f"{type_name(_as_2d(m))}\n")


def _is_xml(filename) -> bool:
    return os.fspath(filename).lower().endswith(".xml")


def _keypoint_values(key: KeyPoint) -> list[str]:
    return [
        repr(float(key.x)),
        repr(float(key.y)),
        repr(float(key.size)),
        repr(float(key.angle)),
        repr(float(key.response)),
        str(int(key.octave)),
        str(int(key.class_id)),
    ]


def _keypoints_from_values(values: list[str]) -> list[KeyPoint]:
    if len(values) % _FIELDS_PER_KEYPOINT:
        raise ValueError("keypoint data is not a multiple of 7 values")
    keys = []
    for i in range(0, len(values), _FIELDS_PER_KEYPOINT):
        x, y, size, angle, response, octave, class_id = values[
            i:i + _FIELDS_PER_KEYPOINT
        ]
        keys.append(
            KeyPoint(
                float(x),
                float(y),
                float(size),
                float(angle),
                float(response),
                int(float(octave)),
                int(float(class_id)),
            )
        )
    return keys


def save_keypoints(filename, keys: Iterable[KeyPoint], nodename: str = "keys") -> None:
    """Write keypoints under ``nodename``; ``.xml`` files get XML, others YAML."""
    rows = [", ".join(_keypoint_values(k)) for k in keys]
    if _is_xml(filename):
        body = "\n".join("  " + row.replace(", ", " ") for row in rows)
        text = (
            '<?xml version="1.0"?>\n<opencv_storage>\n'
            f"<{nodename}>\n{body}</{nodename}>\n</opencv_storage>\n"
        )
    else:
        body = ",\n    ".join(rows)
        text = f"%YAML:1.0\n---\n{nodename}: [ {body} ]\n"
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)


def load_keypoints(filename, nodename: str = "keys") -> list[KeyPoint]:
    """Read the keypoints stored under ``nodename``; an absent node gives ``[]``."""
    with open(filename, encoding="utf-8") as f:
        text = f.read()
    if _is_xml(filename):
        node = ET.fromstring(text).find(nodename)
        if node is None or not node.text:
            return []
        return _keypoints_from_values(node.text.split())
    match = re.search(
        rf"^{re.escape(nodename)}\s*:\s*\[(.*?)\]", text, re.MULTILINE | re.DOTALL
    )
    if match is None:
        return []
    values = [v.strip() for v in match.group(1).split(",") if v.strip()]
    return _keypoints_from_values(values)