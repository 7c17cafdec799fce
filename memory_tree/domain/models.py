from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional, Sequence, Tuple
import time

import numpy as np

from memory_tree.domain.enums import HandGesture, Mode, MotionMode

if TYPE_CHECKING:
    from memory_tree.core.animated_object import AnimatedObject

# Type aliases
Landmark = Tuple[float, ...]          # (x, y) or (x, y, z), image-normalised
LandmarkList = Sequence[Landmark]
Pointer = Tuple[float, float]


def vec3(values: Sequence[float] = (0.0, 0.0, 0.0)) -> np.ndarray:
    """Float copy of a 3-vector."""
    return np.array(values, dtype=float).reshape(3)


@dataclass
class Transform:
    """Position, Euler XYZ rotation (radians) and per-axis scale."""
    position: np.ndarray = field(default_factory=vec3)
    rotation: np.ndarray = field(default_factory=vec3)
    scale: np.ndarray = field(default_factory=lambda: vec3((1.0, 1.0, 1.0)))

    def copy(self) -> "Transform":
        return Transform(self.position.copy(), self.rotation.copy(), self.scale.copy())


@dataclass
class LandmarkFrame:
    """
    One result of the vision collaborator.
    ``landmarks`` is None when no hand was detected.
    """
    landmarks: Optional[List[Landmark]]
    timestamp: float = field(default_factory=time.monotonic)

    @property
    def detected(self) -> bool:
        return bool(self.landmarks)


@dataclass
class HandSignal:
    """Latest continuous pointing output of the classifier."""
    present: bool = False
    x: float = 0.5
    y: float = 0.5

    def clear(self) -> None:
        self.present = False
        self.x = 0.5
        self.y = 0.5


@dataclass
class GestureReading:
    """Everything the classifier derived from one landmark frame."""
    detected: bool
    gesture: HandGesture
    pointer: Optional[Pointer] = None
    requested_mode: Optional[Mode] = None
    pinch_distance: Optional[float] = None
    openness: Optional[float] = None

    @classmethod
    def no_hand(cls) -> "GestureReading":
        return cls(detected=False, gesture=HandGesture.NO_HAND)


@dataclass
class SceneContext:
    """
    Process-wide scene state, owned by the SceneController and handed
    to the components that need it on every call.
    """
    mode: Mode = Mode.TREE
    focus_subject: Optional["AnimatedObject"] = None
    hand_signal: HandSignal = field(default_factory=HandSignal)
    gesture_enabled: bool = False

    # ---- convenience accessors ----------------------------------------
    @property
    def motion_mode(self) -> MotionMode:
        return MotionMode.FREE_SPIN if self.mode == Mode.SCATTER else MotionMode.SEEKING

    @property
    def hand_active(self) -> bool:
        return self.gesture_enabled and self.hand_signal.present
