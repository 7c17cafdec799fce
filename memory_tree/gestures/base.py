"""
Abstract base class for all hand gesture detectors.

Every gesture must:
  - implement detect(landmarks) → HandGesture | None
  - implement reset()
  - declare its NAME class attribute

The classifier runs detectors in priority order and stops at the first
one that reports a gesture.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional

from memory_tree.domain.enums import HandGesture
from memory_tree.domain.models import LandmarkList


class Gesture(ABC):
    """Base class for all gesture detectors."""

    # Override in subclasses for logging / HUD labels
    NAME: str = "UNNAMED_GESTURE"

    def __init__(self) -> None:
        self.value: Optional[float] = None

    @abstractmethod
    def detect(self, landmarks: LandmarkList) -> Optional[HandGesture]:
        """
        Analyse one hand and return the recognised gesture.

        Parameters
        ----------
        landmarks : sequence of (x, y[, z])
            21 image-normalised points of a single hand.

        Returns
        -------
        HandGesture or None
            None when this detector has nothing to say for the frame.
            The measured quantity is left in ``self.value``.
        """

    def reset(self) -> None:
        """Forget the last measurement (e.g. on hand loss)."""
        self.value = None

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.NAME!r}>"
