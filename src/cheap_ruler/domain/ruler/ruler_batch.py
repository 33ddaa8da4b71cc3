"""Vectorised ruler measurements over (N, 2) arrays of (lon, lat) degrees."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import ArrayLike

from cheap_ruler.app.protocols import Scale
from cheap_ruler.domain.entities.geography import Pt, to_bbox


def _as_points(a: ArrayLike) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"expected an (N, 2) array of (lon, lat), got shape {arr.shape}")
    return arr


def _deltas(r: Scale, a: np.ndarray, b: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
    return (b[:, 0] - a[:, 0]) * r.kx, (b[:, 1] - a[:, 1]) * r.ky


def distances(r: Scale, a: ArrayLike, b: ArrayLike) -> np.ndarray:
    """Element-wise distance between two equally sized point arrays, in ruler units."""
    dx, dy = _deltas(r, _as_points(a), _as_points(b))
    return np.hypot(dx, dy)


def distances_to(r: Scale, origin: Pt, points: ArrayLike) -> np.ndarray:
    pts = _as_points(points)
    dx = (pts[:, 0] - origin[0]) * r.kx
    dy = (pts[:, 1] - origin[1]) * r.ky
    return np.hypot(dx, dy)


def bearings(r: Scale, a: ArrayLike, b: ArrayLike) -> np.ndarray:
    dx, dy = _deltas(r, _as_points(a), _as_points(b))
    out = np.degrees(np.arctan2(dx, dy))
    out = np.where(out > 180, out - 360, out)
    # coincident points
    return np.where((dx == 0) & (dy == 0), 0.0, out)


def cumulative_distances(r: Scale, line: ArrayLike) -> np.ndarray:
    """Running length at each vertex; starts at 0, ends at the line's total length."""
    pts = _as_points(line)
    if len(pts) < 2:
        return np.zeros(len(pts))
    seg = distances(r, pts[:-1], pts[1:])
    return np.concatenate(([0.0], np.cumsum(seg)))


def inside_bbox_mask(points: ArrayLike, bbox: Sequence[float]) -> np.ndarray:
    w, s, e, n = to_bbox(bbox)
    pts = _as_points(points)
    lon, lat = pts[:, 0], pts[:, 1]
    return (lon >= w) & (lon <= e) & (lat >= s) & (lat <= n)
