"""
OpenCVUI — window, HUD overlay and keyboard commands.

The pipeline never calls cv2.imshow / waitKey directly; it delegates
to this class.
"""
from __future__ import annotations
from typing import Optional

import cv2
import numpy as np

from memory_tree.app.config import AppConfig
from memory_tree.domain.enums import HandGesture, Mode
from memory_tree.domain.models import GestureReading

_MODE_COLORS = {
    Mode.TREE:    (80,  200,  80),
    Mode.SCATTER: (220, 200,  40),
    Mode.FOCUS:   (200,  60, 200),
}
_GESTURE_COLORS = {
    HandGesture.PINCH:   (200,  60, 200),
    HandGesture.FIST:    (60,   60, 220),
    HandGesture.OPEN:    (80,  220,  80),
    HandGesture.NONE:    (160, 160, 160),
    HandGesture.NO_HAND: (80,   80,  80),
}
_DEFAULT_COLOR = (255, 255, 255)

# key code → command
KEY_BINDINGS = {
    27:       "quit",
    ord("s"): "start",
    ord("r"): "reset",
    ord("p"): "photo",
    ord("1"): "tree",
    ord("2"): "scatter",
    ord("3"): "focus",
    ord("h"): "hud",
}

_HELP = "S start  R reset  P photo  1/2/3 mode  H hud  ESC quit"


class OpenCVUI:
    """Draws the HUD onto the rendered canvas and shows it in a window."""

    def __init__(self, config: AppConfig, window_name: str = "Memory Tree") -> None:
        self._cfg  = config
        self._name = window_name
        self.show_hud = config.show_hud

    def render(
        self,
        canvas: np.ndarray,
        mode: Mode,
        reading: Optional[GestureReading],
        gesture_enabled: bool,
        camera_frame: Optional[np.ndarray] = None,
    ) -> None:
        if self.show_hud:
            self._draw_hud(canvas, mode, reading, gesture_enabled)
            if camera_frame is not None and self._cfg.show_camera_inset:
                self._draw_inset(canvas, camera_frame)
        cv2.imshow(self._name, canvas)

    def poll_command(self) -> Optional[str]:
        """Pump the window event loop and return the command of a pressed key."""
        key = cv2.waitKey(1) & 0xFF
        return KEY_BINDINGS.get(key)

    def close(self) -> None:
        cv2.destroyAllWindows()

    # ------------------------------------------------------------------
    def _draw_hud(
        self,
        canvas: np.ndarray,
        mode: Mode,
        reading: Optional[GestureReading],
        gesture_enabled: bool,
    ) -> None:
        h = canvas.shape[0]

        cv2.putText(canvas, f"Mode: {mode.value}",
                    (20, 50), cv2.FONT_HERSHEY_SIMPLEX, 1.2, _MODE_COLORS.get(mode, _DEFAULT_COLOR), 3)

        if not gesture_enabled:
            status, color = "Gestures: OFF (press S)", (100, 100, 100)
        elif reading is None:
            status, color = "Gestures: ON", (200, 200, 200)
        else:
            status = f"Gesture: {reading.gesture.value}"
            color = _GESTURE_COLORS.get(reading.gesture, _DEFAULT_COLOR)
        cv2.putText(canvas, status, (20, 90), cv2.FONT_HERSHEY_SIMPLEX, 0.7, color, 2)

        if reading is not None and reading.detected:
            metrics = f"pinch {reading.pinch_distance:.3f}"
            if reading.openness is not None:
                metrics += f"  open {reading.openness:.3f}"
            cv2.putText(canvas, metrics, (20, 120), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (150, 150, 150), 1)

        cv2.putText(canvas, _HELP, (20, h - 20), cv2.FONT_HERSHEY_SIMPLEX, 0.5, (255, 255, 255), 1)

    def _draw_inset(self, canvas: np.ndarray, frame: np.ndarray) -> None:
        """Mirrored camera preview in the top-right corner."""
        h, w = canvas.shape[:2]
        inset_w = w // 5
        inset_h = min(h - 20, max(1, int(frame.shape[0] * inset_w / frame.shape[1])))
        preview = cv2.resize(cv2.flip(frame, 1), (inset_w, inset_h))
        canvas[10:10 + inset_h, w - inset_w - 10:w - 10] = preview
