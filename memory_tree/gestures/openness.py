"""
OpennessGesture — fist vs. open hand from how far the fingertips are
from the wrist.

Between the two thresholds lies a dead zone that reports NONE, so a hand
hovering near one boundary does not flicker between modes.
"""
from __future__ import annotations
from typing import Optional

from memory_tree.domain.enums import HandGesture
from memory_tree.domain.models import LandmarkList
from memory_tree.gestures.base import Gesture
from memory_tree.utils.constants import FINGER_TIPS, FIST_THRESHOLD, OPEN_THRESHOLD, WRIST
from memory_tree.utils.geometry import mean_dist


class OpennessGesture(Gesture):
    NAME = "OPENNESS"

    def __init__(
        self,
        fist_below: float = FIST_THRESHOLD,
        open_above: float = OPEN_THRESHOLD,
    ) -> None:
        if fist_below > open_above:
            raise ValueError("fist_below must not exceed open_above")
        super().__init__()
        self._fist_below = fist_below
        self._open_above = open_above

    def detect(self, landmarks: LandmarkList) -> Optional[HandGesture]:
        self.value = mean_dist(landmarks[WRIST], [landmarks[i] for i in FINGER_TIPS])

        if self.value < self._fist_below:
            return HandGesture.FIST
        if self.value > self._open_above:
            return HandGesture.OPEN
        return HandGesture.NONE
