from memory_tree.domain.enums import HandGesture, Mode, MotionMode, Role
from memory_tree.domain.models import (
    GestureReading,
    HandSignal,
    LandmarkFrame,
    SceneContext,
    Transform,
)

__all__ = [
    "HandGesture",
    "Mode",
    "MotionMode",
    "Role",
    "GestureReading",
    "HandSignal",
    "LandmarkFrame",
    "SceneContext",
    "Transform",
]
