"""
GestureClassifier — turns one landmark frame into a GestureReading.

Ordering:
  1. No hand             → NO_HAND, nothing else.
  2. Pointer             → always emitted while a hand is visible.
  3. Pinch               → highest priority, short-circuits.
  4. Fist / open / none  → from fingertip-to-wrist openness.
"""
from __future__ import annotations
from typing import Dict, Optional

from memory_tree.domain.enums import HandGesture, Mode
from memory_tree.domain.models import GestureReading, LandmarkList
from memory_tree.gestures.openness import OpennessGesture
from memory_tree.gestures.pinch import PinchGesture
from memory_tree.utils.constants import (
    FIST_THRESHOLD,
    LANDMARK_COUNT,
    OPEN_THRESHOLD,
    PALM_CENTER,
    PINCH_THRESHOLD,
)

GESTURE_MODES: Dict[HandGesture, Mode] = {
    HandGesture.PINCH: Mode.FOCUS,
    HandGesture.FIST:  Mode.TREE,
    HandGesture.OPEN:  Mode.SCATTER,
}


class GestureClassifier:
    """
    Stateless apart from the last measurements kept by its detectors.

    Parameters
    ----------
    pinch_threshold : float
        Thumb–index distance strictly below which the hand pinches.
    fist_threshold, open_threshold : float
        Openness bounds of the dead zone.
    """

    def __init__(
        self,
        pinch_threshold: float = PINCH_THRESHOLD,
        fist_threshold: float = FIST_THRESHOLD,
        open_threshold: float = OPEN_THRESHOLD,
    ) -> None:
        self._pinch    = PinchGesture(pinch_threshold)
        self._openness = OpennessGesture(fist_threshold, open_threshold)

    # ------------------------------------------------------------------
    def classify(self, landmarks: Optional[LandmarkList]) -> GestureReading:
        if not landmarks:
            self.reset()
            return GestureReading.no_hand()

        if len(landmarks) < LANDMARK_COUNT:
            raise ValueError(
                f"Expected {LANDMARK_COUNT} landmarks per hand, got {len(landmarks)}"
            )

        palm = landmarks[PALM_CENTER]
        pointer = (1.0 - palm[0], palm[1])     # mirrored for the front camera

        gesture = self._pinch.detect(landmarks)
        openness = None
        if gesture is None:
            gesture = self._openness.detect(landmarks)
            openness = self._openness.value

        return GestureReading(
            detected=True,
            gesture=gesture,
            pointer=pointer,
            requested_mode=GESTURE_MODES.get(gesture),
            pinch_distance=self._pinch.value,
            openness=openness,
        )

    def reset(self) -> None:
        self._pinch.reset()
        self._openness.reset()
