"""
Layout generators — pure functions producing the target placement of a
single object for each mode.

Every call draws fresh randomness, so re-entering a mode reshuffles.
"""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from memory_tree.utils.constants import (
    FOCUS_ANCHOR,
    FOCUS_PUSH,
    FOCUS_SCALE,
    SCATTER_MAX_RADIUS,
    SCATTER_MIN_RADIUS,
    TREE_BOTTOM,
    TREE_HEIGHT,
    TREE_JITTER,
    TREE_RADIUS,
    TREE_SWEEP,
)
from memory_tree.utils.geometry import spherical


@dataclass(frozen=True)
class Placement:
    """Target transform. ``rotation`` None means: leave it as it is."""
    position: np.ndarray
    rotation: Optional[np.ndarray]
    scale: np.ndarray


def tree_target(
    index: int,
    total: int,
    base_scale: Sequence[float],
    rng: np.random.Generator,
) -> Placement:
    """
    Slot ``index`` of ``total`` on a descending helix: wide at the bottom,
    narrow at the apex, height spanning [-20, 20].
    """
    t = index / total
    angle  = TREE_SWEEP * t
    radius = TREE_RADIUS * (1 - t)
    height = TREE_HEIGHT * t + TREE_BOTTOM

    jitter_x, jitter_z = (rng.random(2) - 0.5) * TREE_JITTER
    position = np.array([
        math.cos(angle) * radius + jitter_x,
        height,
        math.sin(angle) * radius + jitter_z,
    ])
    pitch, yaw = rng.random(2) * math.pi
    return Placement(position, np.array([pitch, yaw, 0.0]), np.array(base_scale, dtype=float))


def scatter_position(rng: np.random.Generator) -> np.ndarray:
    # Radius is linear-uniform, not cube-root: the outer shell stays dense.
    r = SCATTER_MIN_RADIUS + (SCATTER_MAX_RADIUS - SCATTER_MIN_RADIUS) * rng.random()
    theta = 2 * math.pi * rng.random()
    phi = math.acos(2 * rng.random() - 1)
    return spherical(r, theta, phi)


def scatter_target(base_scale: Sequence[float], rng: np.random.Generator) -> Placement:
    """Random point in the [8, 20] shell. Rotation is left to free spin."""
    return Placement(scatter_position(rng), None, np.array(base_scale, dtype=float))


def focus_target(
    is_subject: bool,
    base_scale: Sequence[float],
    rng: np.random.Generator,
) -> Placement:
    """
    The subject goes in front of the camera, upright and enlarged.
    Everything else is scattered twice as far out to clear the stage.
    """
    if is_subject:
        return Placement(
            np.array(FOCUS_ANCHOR, dtype=float),
            np.zeros(3),
            np.array(base_scale, dtype=float) * FOCUS_SCALE,
        )
    scattered = scatter_target(base_scale, rng)
    return Placement(scattered.position * FOCUS_PUSH, None, scattered.scale)
