"""
HandTracker — encapsulates all MediaPipe logic.
The rest of the application never imports mediapipe directly.
"""
from __future__ import annotations
from pathlib import Path
from typing import List, Union

import cv2
import mediapipe as mp
import numpy as np
from mediapipe.tasks import python
from mediapipe.tasks.python import vision

from memory_tree.domain.models import Landmark, LandmarkFrame


class HandTracker:
    """
    Runs the MediaPipe HandLandmarker (VIDEO mode, one hand) on BGR
    frames and returns image-normalised landmarks of the first hand.

    Parameters
    ----------
    model_path : Path
        The ``hand_landmarker.task`` bundle.
    min_detection_confidence : float
    min_tracking_confidence : float
    """

    def __init__(
        self,
        model_path: Union[str, Path],
        min_detection_confidence: float = 0.5,
        min_tracking_confidence: float = 0.5,
    ) -> None:
        model_path = Path(model_path)
        if not model_path.exists():
            raise FileNotFoundError(f"Missing model file: {model_path}")

        options = vision.HandLandmarkerOptions(
            base_options=python.BaseOptions(model_asset_path=str(model_path)),
            running_mode=vision.RunningMode.VIDEO,
            num_hands=1,
            min_hand_detection_confidence=min_detection_confidence,
            min_tracking_confidence=min_tracking_confidence,
        )
        self._landmarker = vision.HandLandmarker.create_from_options(options)
        self._start_time: float | None = None
        self._last_timestamp_ms = -1

    # ------------------------------------------------------------------
    def process(self, frame: np.ndarray, timestamp: float) -> LandmarkFrame:
        """
        Parameters
        ----------
        frame : np.ndarray
            BGR frame from OpenCV.
        timestamp : float
            Monotonic capture time in seconds; also identifies the result.

        Returns
        -------
        LandmarkFrame
            21 (x, y, z) points in [0, 1] image space, or no landmarks.
        """
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        image = mp.Image(image_format=mp.ImageFormat.SRGB, data=rgb)

        if self._start_time is None:
            self._start_time = timestamp

        # VIDEO mode requires strictly increasing millisecond timestamps
        timestamp_ms = max(self._last_timestamp_ms + 1, int((timestamp - self._start_time) * 1000))
        self._last_timestamp_ms = timestamp_ms

        results = self._landmarker.detect_for_video(image, timestamp_ms)
        if not results.hand_landmarks:
            return LandmarkFrame(None, timestamp)

        points: List[Landmark] = [(lm.x, lm.y, lm.z) for lm in results.hand_landmarks[0]]
        return LandmarkFrame(points, timestamp)

    def release(self) -> None:
        self._landmarker.close()
