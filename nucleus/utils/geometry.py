"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import numpy as np
from numpy.typing import NDArray


def as_xy(point: Any) -> tuple[float, float]:
    """Read one point given as a mapping, an object with ``x``/``y``, or a pair."""
    if isinstance(point, Mapping):
        return (float(point["x"]), float(point["y"]))
    if hasattr(point, "x"):
        return (float(point.x), float(point.y))
    x, y = point
    return (float(x), float(y))


def to_points_array(points: Iterable[Any] | NDArray[np.float64]) -> NDArray[np.float64]:
    """Coerce a stroke into an Nx2 float array.

    Accepts an Nx2 array, (x, y) pairs, ``{"x": ..., "y": ...}`` mappings,
    or objects with ``x``/``y`` attributes.
    """
    if isinstance(points, np.ndarray):
        arr = points.astype(np.float64, copy=False)
    else:
        rows = [
            as_xy(p) if isinstance(p, Mapping) or hasattr(p, "x") else tuple(p)
            for p in points
        ]
        if not rows:
            return np.empty((0, 2))
        arr = np.asarray(rows, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Expected Nx2 points, got shape {arr.shape}")
    return arr


def collapse_repeats(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Drop non-finite rows and merge consecutive identical samples."""
    pts = points[np.all(np.isfinite(points), axis=1)]
    if len(pts) < 2:
        return pts
    keep = np.ones(len(pts), dtype=bool)
    keep[1:] = np.any(np.diff(pts, axis=0) != 0, axis=1)
    return pts[keep]


def drop_closing_copies(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Strip trailing samples that repeat the first one exactly."""
    end = len(points)
    while end > 1 and np.array_equal(points[end - 1], points[0]):
        end -= 1
    return points[:end]


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def distances_to(points: NDArray[np.float64], center: tuple[float, float]) -> NDArray[np.float64]:
    """Distance from ``center`` to each point."""
    cx, cy = center
    return np.sqrt((points[:, 0] - cx) ** 2 + (points[:, 1] - cy) ** 2)


def mean_absolute_deviation(values: NDArray[np.float64], about: float) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(np.abs(values - about)))


def point_distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    return float(np.hypot(a[0] - b[0], a[1] - b[1]))


def closure_gap(points: NDArray[np.float64]) -> float:
    """Straight-line distance between the first and last sample.

    Callers pass finite samples only; a NaN endpoint would make every
    comparison against the gap false.
    """
    if len(points) < 2:
        return 0.0
    return point_distance(tuple(points[0]), tuple(points[-1]))
