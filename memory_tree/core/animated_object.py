"""
AnimatedObject — one placeable item: a render handle plus the target
transform its on-screen transform eases toward.
"""
from __future__ import annotations
from typing import Optional, Protocol, Sequence

import numpy as np

from memory_tree.domain.enums import MotionMode, Role
from memory_tree.domain.models import Transform
from memory_tree.utils.constants import EASE_FACTOR, SPIN_GAIN, SPIN_RANGE
from memory_tree.utils.geometry import approach


class RenderHandle(Protocol):
    """
    What the core needs from the rendering collaborator: a thing with a
    writable position, Euler rotation and scale.
    """
    position: np.ndarray
    rotation: np.ndarray
    scale: np.ndarray


class AnimatedObject:
    """
    Parameters
    ----------
    handle : RenderHandle
        Owned by the renderer; this object only moves it.
    role : Role
    rng : numpy.random.Generator, optional
        Source for the spin velocity.
    ease : float
        Blend factor applied once per tick.
    """

    def __init__(
        self,
        handle: RenderHandle,
        role: Role = Role.DECORATION,
        rng: Optional[np.random.Generator] = None,
        ease: float = EASE_FACTOR,
    ) -> None:
        rng = rng if rng is not None else np.random.default_rng()

        handle.position = np.array(handle.position, dtype=float)
        handle.rotation = np.array(handle.rotation, dtype=float)
        handle.scale    = np.array(handle.scale, dtype=float)

        self.handle = handle
        self.role   = Role(role)
        self.base_scale = handle.scale.copy()
        self.target = Transform(
            handle.position.copy(), handle.rotation.copy(), self.base_scale.copy()
        )
        self.spin_velocity = (rng.random(3) - 0.5) * SPIN_RANGE
        self._ease = ease

    # ---- convenience accessors ----------------------------------------
    @property
    def is_photo(self) -> bool:
        return self.role is Role.PHOTO

    # ------------------------------------------------------------------
    def set_target(
        self,
        position: Optional[Sequence[float]] = None,
        rotation: Optional[Sequence[float]] = None,
        scale: Optional[Sequence[float]] = None,
    ) -> None:
        """Overwrite the given target components. The handle is not touched."""
        if position is not None:
            self.target.position = np.array(position, dtype=float)
        if rotation is not None:
            self.target.rotation = np.array(rotation, dtype=float)
        if scale is not None:
            self.target.scale = np.array(scale, dtype=float)

    def snap_to_target(self) -> None:
        """Place the handle at its target position (used on creation)."""
        self.handle.position[:] = self.target.position

    def tick(self, motion: MotionMode = MotionMode.SEEKING) -> None:
        """Advance the displayed transform by one frame."""
        h = self.handle
        approach(h.position, self.target.position, self._ease)

        if motion is MotionMode.FREE_SPIN:
            h.rotation[:2] += self.spin_velocity[:2] * SPIN_GAIN
        else:
            approach(h.rotation, self.target.rotation, self._ease)

        approach(h.scale, self.target.scale, self._ease)

    def __repr__(self) -> str:
        return f"<AnimatedObject role={self.role.value} pos={np.round(self.handle.position, 2)}>"
