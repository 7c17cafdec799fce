"""
PinchGesture — thumb tip touching index tip.
"""
from __future__ import annotations
from typing import Optional

from memory_tree.domain.enums import HandGesture
from memory_tree.domain.models import LandmarkList
from memory_tree.gestures.base import Gesture
from memory_tree.utils.constants import INDEX_TIP, PINCH_THRESHOLD, THUMB_TIP
from memory_tree.utils.geometry import dist


class PinchGesture(Gesture):
    NAME = "PINCH"

    def __init__(self, threshold: float = PINCH_THRESHOLD) -> None:
        super().__init__()
        self._threshold = threshold

    def detect(self, landmarks: LandmarkList) -> Optional[HandGesture]:
        self.value = dist(landmarks[THUMB_TIP], landmarks[INDEX_TIP])
        if self.value < self._threshold:
            return HandGesture.PINCH
        return None
