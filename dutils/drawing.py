"""Drawing on images held as numpy arrays: primitives, keypoints, plots and projections.

Colours follow the blue-green-red channel order; on single-channel images
only the first component of a colour is used.
"""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

import numpy as np
from PIL import Image

from dutils.cvtypes import KeyPoint
from dutils.randomness import random_int
from dutils.transformations import rodrigues

_PI = 3.14159265

Color = Sequence[float] | float


@dataclass
class Style:
    """Line colour and thickness."""

    color: tuple = (0, 0, 0)
    thickness: int = 1

    @classmethod
    def from_char(cls, c: str, thickness: int = 1) -> Style:
        """Style from a one-letter colour code among ``bgrcmykw``."""
        r = g = b = 0
        if c == "b":
            b = 255
        elif c == "g":
            g = 255
        elif c == "r":
            r = 255
        elif c == "c":
            b = g = 255
        elif c == "m":
            r = b = 255
        elif c == "y":
            r = g = 255
        elif c == "w":
            r = g = b = 255
        return cls((b, g, r), thickness)


def _color_value(image: np.ndarray, color: Color) -> np.ndarray:
    components = [color] if np.isscalar(color) else list(color)
    channels = 1 if image.ndim == 2 else image.shape[2]
    components = (components + [0] * channels)[:channels]
    if image.ndim == 2:
        return np.asarray(components[0]).astype(image.dtype)
    return np.asarray(components).astype(image.dtype)


def _put(image: np.ndarray, ys, xs, color: Color) -> None:
    ys = np.asarray(ys, dtype=np.int64)
    xs = np.asarray(xs, dtype=np.int64)
    inside = (ys >= 0) & (ys < image.shape[0]) & (xs >= 0) & (xs < image.shape[1])
    image[ys[inside], xs[inside]] = _color_value(image, color)


def _round(v: float) -> int:
    return math.floor(float(v) + 0.5)


def _bresenham(x0: int, y0: int, x1: int, y1: int) -> Iterator[tuple[int, int]]:
    dx, dy = abs(x1 - x0), -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy
    while True:
        yield x0, y0
        if x0 == x1 and y0 == y1:
            return
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def draw_line(image: np.ndarray, p1, p2, color: Color, thickness: int = 1) -> None:
    """Draw a segment between two (x, y) points, in place."""
    x0, y0 = _round(p1[0]), _round(p1[1])
    x1, y1 = _round(p2[0]), _round(p2[1])
    if thickness <= 1:
        h, w = image.shape[:2]
        # clip the scan to a box around the image to bound the work
        pts = [
            (x, y)
            for x, y in _bresenham(x0, y0, x1, y1)
            if -1 <= x <= w and -1 <= y <= h
        ]
        if pts:
            xs, ys = zip(*pts)
            _put(image, ys, xs, color)
        return

    radius = thickness / 2.0
    h, w = image.shape[:2]
    left = max(math.floor(min(x0, x1) - radius), 0)
    right = min(math.ceil(max(x0, x1) + radius), w - 1)
    top = max(math.floor(min(y0, y1) - radius), 0)
    bottom = min(math.ceil(max(y0, y1) + radius), h - 1)
    if left > right or top > bottom:
        return
    ys, xs = np.mgrid[top:bottom + 1, left:right + 1]
    dx, dy = x1 - x0, y1 - y0
    length2 = dx * dx + dy * dy
    if length2 == 0:
        t = np.zeros_like(xs, dtype=np.float64)
    else:
        t = np.clip(((xs - x0) * dx + (ys - y0) * dy) / length2, 0.0, 1.0)
    dist = np.hypot(xs - (x0 + t * dx), ys - (y0 + t * dy))
    mask = dist <= radius
    _put(image, ys[mask], xs[mask], color)


def draw_circle(
    image: np.ndarray, center, radius: int, color: Color, thickness: int = 1
) -> None:
    """Draw a circle around an (x, y) centre, in place; negative thickness fills it."""
    cx, cy = _round(center[0]), _round(center[1])
    radius = max(int(radius), 0)
    if thickness == 1:
        xs: list[int] = []
        ys: list[int] = []
        x, y, err = radius, 0, 1 - radius
        while x >= y:
            for px, py in (
                (x, y), (y, x), (-y, x), (-x, y),
                (-x, -y), (-y, -x), (y, -x), (x, -y),
            ):
                xs.append(cx + px)
                ys.append(cy + py)
            y += 1
            if err < 0:
                err += 2 * y + 1
            else:
                x -= 1
                err += 2 * (y - x) + 1
        _put(image, ys, xs, color)
        return

    half = thickness / 2.0 if thickness > 0 else 0.0
    reach = radius + half
    h, w = image.shape[:2]
    left = max(math.floor(cx - reach), 0)
    right = min(math.ceil(cx + reach), w - 1)
    top = max(math.floor(cy - reach), 0)
    bottom = min(math.ceil(cy + reach), h - 1)
    if left > right or top > bottom:
        return
    gy, gx = np.mgrid[top:bottom + 1, left:right + 1]
    dist = np.hypot(gx - cx, gy - cy)
    mask = dist <= radius if thickness < 0 else np.abs(dist - radius) <= half
    _put(image, gy[mask], gx[mask], color)


class Plot:
    """A canvas mapping data coordinates to pixels with equal axis scales."""

    def __init__(
        self,
        rows: int = 240,
        cols: int = 320,
        minx: float = 0.0,
        maxx: float = 1.0,
        miny: float = 0.0,
        maxy: float = 1.0,
        margin: int = 0,
    ):
        self._bg: tuple = (255, 255, 255)
        self._margin = margin
        self.image = np.empty((rows, cols, 3), dtype=np.uint8)
        self.clear()
        self._set_axes(minx, maxx, miny, maxy, margin)

    def create(
        self,
        minx: float,
        maxx: float,
        miny: float,
        maxy: float,
        rows: int | None = None,
        cols: int | None = None,
        margin: int | None = None,
    ) -> None:
        """Change the axes (and optionally the size or margin) and clear the canvas."""
        if margin is not None:
            self._margin = margin
        if rows is not None or cols is not None:
            new_rows = self.image.shape[0] if rows is None else rows
            new_cols = self.image.shape[1] if cols is None else cols
            self.image = np.empty((new_rows, new_cols, 3), dtype=np.uint8)
        self._set_axes(minx, maxx, miny, maxy, self._margin)
        self.clear()

    def set_background_color(self, color: Color) -> None:
        """Set the colour used by :meth:`clear`; the canvas is not changed."""
        self._bg = color

    def clear(self) -> None:
        """Fill the canvas with the background colour."""
        self.image[...] = _color_value(self.image, self._bg)

    def line(
        self, x1: float, y1: float, x2: float, y2: float, style: Style | None = None
    ) -> None:
        """Draw a segment between two points in data coordinates."""
        style = Style() if style is None else style
        draw_line(
            self.image,
            (self._to_px_x(x1), self._to_px_y(y1)),
            (self._to_px_x(x2), self._to_px_y(y2)),
            style.color,
            style.thickness,
        )

    def polyline(self, x: Sequence[float], y: Sequence[float], style: Style | None = None) -> None:
        """Draw the lines joining consecutive points, or a dot for a single point."""
        style = Style() if style is None else style
        points = [(self._to_px_x(a), self._to_px_y(b)) for a, b in zip(x, y)]
        if not points:
            return
        if len(points) == 1:
            draw_circle(self.image, points[0], 1, style.color, style.thickness)
            return
        for a, b in zip(points, points[1:]):
            draw_line(self.image, a, b, style.color, style.thickness)

    def _set_axes(
        self, minx: float, maxx: float, miny: float, maxy: float, margin: int
    ) -> None:
        rows, cols = self.image.shape[:2]
        width, height = cols - margin * 2, rows - margin * 2
        if width <= 0 or height <= 0:
            raise ValueError("the margin leaves no drawing area")
        self._cx = (minx + maxx) / 2
        self._cy = (miny + maxy) / 2
        upp = max((maxx - minx) / width, (maxy - miny) / height)
        if upp == 0:
            raise ValueError("empty axis range")
        self._uppx = self._uppy = upp

    def _to_px_x(self, x: float) -> int:
        return int((x - self._cx) / self._uppx + self.image.shape[1] // 2)

    def _to_px_y(self, y: float) -> int:
        return int((y - self._cy) / self._uppy + self.image.shape[0] // 2)


def draw_keypoints(
    image: np.ndarray,
    keypoints: Sequence[KeyPoint],
    color_octave: bool = False,
    use_cartesian_angle: bool = False,
) -> None:
    """Draw each keypoint as a circle with a radius towards its angle, in place.

    With ``color_octave`` octaves 1, 2 and 3 are red, green and blue; any
    other keypoint is white.
    """
    colors = [(0, 0, 255), (0, 255, 0), (255, 0, 0), (255, 255, 255)]
    for kp in keypoints:
        s = kp.size / 2.0
        if not color_octave or kp.octave < 1 or kp.octave > 3:
            color = colors[3]
        else:
            color = colors[kp.octave - 1]
        r1 = int(kp.y + 0.5)
        c1 = int(kp.x + 0.5)
        draw_circle(image, (c1, r1), int(s), color, 1)
        if kp.angle >= 0:
            o = kp.angle * _PI / 180.0
            c2 = int(s * math.cos(o) + kp.x + 0.5)
            if use_cartesian_angle:
                r2 = int(-s * math.sin(o) + kp.y + 0.5)
            else:
                r2 = int(s * math.sin(o) + kp.y + 0.5)
            draw_line(image, (c1, r1), (c2, r2), color)


def _write_image(filename, image: np.ndarray) -> None:
    data = np.asarray(image)
    if data.dtype != np.uint8:
        data = np.clip(data, 0, 255).astype(np.uint8)
    if data.ndim == 3 and data.shape[2] == 1:
        data = data[..., 0]
    elif data.ndim == 3 and data.shape[2] >= 3:
        data = data[..., 2::-1]
    Image.fromarray(np.ascontiguousarray(data)).save(filename)


def save_keypoint_image(filename, image: np.ndarray, keypoints: Sequence[KeyPoint]) -> None:
    """Draw keypoints on a copy of ``image`` and save it."""
    im = np.array(image, copy=True)
    draw_keypoints(im, keypoints)
    _write_image(filename, im)


def _to_gray(image) -> np.ndarray:
    image = np.asarray(image)
    if image.ndim == 3 and image.shape[2] > 1:
        channels = image[..., :3].astype(np.float64)
        gray = 0.299 * channels[..., 0] + 0.587 * channels[..., 1] + 0.114 * channels[..., 2]
        return np.clip(np.floor(gray + 0.5), 0, 255).astype(np.uint8)
    if image.ndim == 3:
        image = image[..., 0]
    return np.clip(image, 0, 255).astype(np.uint8)


def draw_correspondences(
    im1: np.ndarray,
    im2: np.ndarray,
    kp1: Sequence[KeyPoint],
    kp2: Sequence[KeyPoint],
    c1: Sequence[int],
    c2: Sequence[int],
) -> np.ndarray:
    """Stack both images (in grey) one above the other and join matched keypoints.

    ``c1[i]`` and ``c2[i]`` index a pair of corresponding keypoints. Each
    correspondence line gets a random colour.
    """
    aux1 = _to_gray(im1)
    aux2 = _to_gray(im2)
    draw_keypoints(aux1, kp1)
    draw_keypoints(aux2, kp2)

    h1, w1 = aux1.shape
    h2, w2 = aux2.shape
    gray = np.zeros((h1 + h2, max(w1, w2)), dtype=np.uint8)
    gray[:h1, :w1] = aux1
    gray[h1:, :w2] = aux2
    image = np.repeat(gray[:, :, np.newaxis], 3, axis=2)

    for i1, i2 in zip(c1, c2):
        mx, my = int(kp1[i1].x), int(kp1[i1].y)
        px, py = int(kp2[i2].x), int(kp2[i2].y) + h1
        color = (random_int(0, 255), random_int(0, 255), random_int(0, 255))
        draw_line(image, (mx, my), (px, py), color, 1)
    return image


def save_correspondence_image(
    filename,
    im1: np.ndarray,
    im2: np.ndarray,
    kp1: Sequence[KeyPoint],
    kp2: Sequence[KeyPoint],
    c1: Sequence[int],
    c2: Sequence[int],
) -> None:
    """Build the correspondence image and save it."""
    _write_image(filename, draw_correspondences(im1, im2, kp1, kp2, c1, c2))


def project_points(points, r, t, a, k=None) -> np.ndarray:
    """Project 3-D points through a pinhole camera with lens distortion.

    ``r`` is a 3x3 rotation or a rotation vector, ``t`` a translation, ``a``
    the 3x3 intrinsic matrix and ``k`` the distortion coefficients
    ``(k1, k2, p1, p2[, k3])``. Returns an Nx2 array of pixel coordinates.
    """
    pts = np.asarray(points, dtype=np.float64).reshape(-1, 3)
    r = np.asarray(r, dtype=np.float64)
    rotation = r if r.shape == (3, 3) else rodrigues(r).astype(np.float64)
    translation = np.asarray(t, dtype=np.float64).ravel()[:3]
    a = np.asarray(a, dtype=np.float64)

    coeffs = np.zeros(5)
    if k is not None:
        given = np.asarray(k, dtype=np.float64).ravel()[:5]
        coeffs[: given.size] = given
    k1, k2, p1, p2, k3 = coeffs

    cam = pts @ rotation.T + translation
    z = cam[:, 2]
    x = cam[:, 0] / z
    y = cam[:, 1] / z
    r2 = x * x + y * y
    radial = 1 + k1 * r2 + k2 * r2 * r2 + k3 * r2 * r2 * r2
    xd = x * radial + 2 * p1 * x * y + p2 * (r2 + 2 * x * x)
    yd = y * radial + p1 * (r2 + 2 * y * y) + 2 * p2 * x * y
    u = a[0, 0] * xd + a[0, 2]
    v = a[1, 1] * yd + a[1, 2]
    return np.column_stack([u, v])


def draw_reference_system(
    image: np.ndarray, c_t_o, a, k=None, length: float = 0.1
) -> np.ndarray:
    """Draw the axes of the frame given by a 4x4 camera-to-frame transformation."""
    c_t_o = np.asarray(c_t_o, dtype=np.float64)
    c_r_o = c_t_o[:3, :3]
    translation = c_t_o[:3, 3] / c_t_o[3, 3]
    return draw_reference_system_rt(image, c_r_o, translation, a, k, length)


def draw_reference_system_rt(
    image: np.ndarray, c_r_o, c_t_o, a, k=None, length: float = 0.1
) -> np.ndarray:
    """Draw axes x (red), y (green) and z (blue) of a frame; returns the
    projected origin and axis ends."""
    object_points = [
        (0.0, 0.0, 0.0),
        (length, 0.0, 0.0),
        (0.0, length, 0.0),
        (0.0, 0.0, length),
    ]
    points2d = project_points(object_points, c_r_o, c_t_o, a, k)
    if image.ndim == 3 and image.shape[2] == 3:
        bluez, greeny, redx = (255, 0, 0), (0, 255, 0), (0, 0, 255)
    else:
        bluez, greeny, redx = (18, 18, 18), (182, 182, 182), (120, 120, 120)
    draw_line(image, points2d[0], points2d[1], redx, 2)
    draw_line(image, points2d[0], points2d[2], greeny, 2)
    draw_line(image, points2d[0], points2d[3], bluez, 2)
    return points2d


def _draw_quad(image: np.ndarray, box: np.ndarray, style: Style) -> None:
    for i in range(4):
        draw_line(image, box[i], box[(i + 1) % 4], style.color, style.thickness)


def draw_box(
    image: np.ndarray,
    c_r_o,
    c_t_o,
    width: float,
    height: float,
    a,
    k=None,
    style: Style | None = None,
) -> np.ndarray:
    """Draw a width x height rectangle centred on a 3-D frame; returns its 4 image corners."""
    style = Style.from_char("r", 2) if style is None else style
    w, h = width / 2.0, height / 2.0
    corners = [(-w, -h, 0.0), (w, -h, 0.0), (w, h, 0.0), (-w, h, 0.0)]
    box = project_points(corners, c_r_o, c_t_o, a, k)
    _draw_quad(image, box, style)
    return box


def draw_box_homography(
    image: np.ndarray, s_h_b, cols: int, rows: int, style: Style | None = None
) -> np.ndarray:
    """Draw the outline of a cols x rows plane mapped by a homography; returns its corners."""
    style = Style.from_char("r", 2) if style is None else style
    h = np.asarray(s_h_b, dtype=np.float64)
    plane = np.array(
        [[0, cols, cols, 0], [0, 0, rows, rows], [1, 1, 1, 1]], dtype=np.float64
    )
    p = h @ plane
    box = (p[:2] / p[2]).T
    _draw_quad(image, box, style)
    return box