"""
Pure geometric utility functions.
No imports from the rest of the project, safe to use anywhere.
"""
from __future__ import annotations
import math
from typing import Sequence

import numpy as np


def dist(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points, using x and y only."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def mean_dist(origin: Sequence[float], points: Sequence[Sequence[float]]) -> float:
    """Mean 2D distance from ``origin`` to each of ``points``."""
    return sum(dist(origin, p) for p in points) / len(points)


def approach(current: np.ndarray, target: np.ndarray, factor: float) -> None:
    """
    Move ``current`` in place a fixed fraction of the way to ``target``.
    Never overshoots while 0 <= factor <= 1.
    """
    current += (target - current) * factor


def spherical(radius: float, theta: float, phi: float) -> np.ndarray:
    """Point from radius, azimuth ``theta`` and polar angle ``phi``."""
    return np.array([
        radius * math.sin(phi) * math.cos(theta),
        radius * math.sin(phi) * math.sin(theta),
        radius * math.cos(phi),
    ])


def euler_matrix(rotation: Sequence[float]) -> np.ndarray:
    """Rotation matrix for Euler angles applied in XYZ order."""
    x, y, z = rotation
    cx, sx = math.cos(x), math.sin(x)
    cy, sy = math.cos(y), math.sin(y)
    cz, sz = math.cos(z), math.sin(z)
    rx = np.array([[1, 0, 0], [0, cx, -sx], [0, sx, cx]])
    ry = np.array([[cy, 0, sy], [0, 1, 0], [-sy, 0, cy]])
    rz = np.array([[cz, -sz, 0], [sz, cz, 0], [0, 0, 1]])
    return rx @ ry @ rz
