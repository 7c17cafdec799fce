"""
OrientationController — damped rotation of the whole composition.
"""
from __future__ import annotations

import numpy as np

from memory_tree.domain.enums import Mode
from memory_tree.domain.models import SceneContext
from memory_tree.utils.constants import (
    FOCUS_BLEND,
    IDLE_PITCH_DECAY,
    IDLE_YAW_STEP,
    ORIENT_BLEND,
    PITCH_GAIN,
    YAW_GAIN,
)
from memory_tree.utils.geometry import approach

PITCH, YAW = 0, 1


class OrientationController:
    """
    Holds the composition rotation (pitch, yaw, roll) and advances it
    once per frame:

    - FOCUS: ease back to neutral so the subject faces the viewer.
    - Hand visible and gestures on: ease toward the pointer.
    - Otherwise: slow auto-yaw while pitch levels out.
    """

    def __init__(
        self,
        blend: float = ORIENT_BLEND,
        focus_blend: float = FOCUS_BLEND,
        yaw_gain: float = YAW_GAIN,
        pitch_gain: float = PITCH_GAIN,
        idle_yaw_step: float = IDLE_YAW_STEP,
        idle_pitch_decay: float = IDLE_PITCH_DECAY,
    ) -> None:
        self.rotation = np.zeros(3)
        self._blend = blend
        self._focus_blend = focus_blend
        self._yaw_gain = yaw_gain
        self._pitch_gain = pitch_gain
        self._idle_yaw_step = idle_yaw_step
        self._idle_pitch_decay = idle_pitch_decay

    def update(self, context: SceneContext) -> np.ndarray:
        if context.mode is Mode.FOCUS:
            approach(self.rotation, np.zeros(3), self._focus_blend)
        elif context.hand_active:
            signal = context.hand_signal
            target_yaw = (signal.x - 0.5) * self._yaw_gain
            target_pitch = (signal.y - 0.5) * self._pitch_gain
            self.rotation[YAW] += (target_yaw - self.rotation[YAW]) * self._blend
            self.rotation[PITCH] += (target_pitch - self.rotation[PITCH]) * self._blend
        else:
            self.rotation[YAW] += self._idle_yaw_step
            self.rotation[PITCH] *= self._idle_pitch_decay
        return self.rotation

    def reset(self) -> None:
        self.rotation[:] = 0.0
