from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from memory_tree.utils.constants import (
    EASE_FACTOR,
    FIST_THRESHOLD,
    OPEN_THRESHOLD,
    PINCH_THRESHOLD,
)


@dataclass
class AppConfig:
    """
    Central configuration injected into all components.
    Core defaults live in utils.constants; this is what a run overrides.
    """
    # ---- vision --------------------------------------------------------
    use_camera: bool = True
    camera_device: int = 0
    fps_limit: int = 60
    model_path: Path = Path("models/hand_landmarker.task")
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5

    # ---- scene ---------------------------------------------------------
    decoration_count: int = 1500
    dust_count: int = 2500
    photo_paths: List[Path] = field(default_factory=list)
    seed: Optional[int] = None

    # ---- easing --------------------------------------------------------
    ease: float = EASE_FACTOR

    # ---- gesture classifier / stabilizer -------------------------------
    pinch_threshold: float = PINCH_THRESHOLD
    fist_threshold: float = FIST_THRESHOLD
    open_threshold: float = OPEN_THRESHOLD
    gesture_window: int = 1
    gesture_consensus: int = 1

    # ---- window --------------------------------------------------------
    window_width: int = 1280
    window_height: int = 720
    fov: float = 75.0
    show_hud: bool = True
    show_camera_inset: bool = True


# Default singleton: import and use directly, or override in tests.
default_config = AppConfig()
