"""Lightweight geometry helpers used by the planner.

Collision checks run inside the RRT sampling loop, so they are vectorised with
NumPy over every obstacle at once instead of looping in Python.
"""

from __future__ import annotations

import numpy as np

EPSILON = 1e-9


def points_segment_distances(points: np.ndarray, start: np.ndarray, end: np.ndarray, eps: float = EPSILON) -> np.ndarray:
    """Distances from each row of `points` (shape (N, 2)) to the segment start→end."""
    segment = end - start
    denom = np.dot(segment, segment)
    offsets = points - start

    if denom < eps:
        return np.hypot(offsets[:, 0], offsets[:, 1])

    t = np.clip(offsets @ segment / denom, 0.0, 1.0)
    diff = offsets - t[:, None] * segment
    return np.hypot(diff[:, 0], diff[:, 1])


def segment_intersects_circles(
    start: np.ndarray,
    end: np.ndarray,
    centers: np.ndarray,
    radii: np.ndarray,
    tolerance: float = EPSILON,
) -> bool:
    """Return True if the segment start→end passes inside any circle.

    A segment that only grazes a circle (within `tolerance`) does not count as a collision.
    """
    if len(centers) == 0:
        return False
    return bool(np.any(points_segment_distances(centers, start, end) < radii - tolerance))


def points_in_circles(points: np.ndarray, centers: np.ndarray, radii: np.ndarray) -> np.ndarray:
    """Boolean mask (len(points),) of points strictly inside at least one circle."""
    if len(centers) == 0 or len(points) == 0:
        return np.zeros(len(points), dtype=bool)
    diff = points[:, None, :] - centers[None, :, :]
    dist = np.hypot(diff[..., 0], diff[..., 1])
    return np.any(dist < radii[None, :], axis=1)


def path_length(waypoints) -> float:
    """Cumulative length of a polyline given as a sequence of 2D points."""
    points = np.asarray([np.asarray(p, dtype=float) for p in waypoints])
    if len(points) < 2:
        return 0.0
    steps = np.diff(points, axis=0)
    return float(np.sum(np.hypot(steps[:, 0], steps[:, 1])))
