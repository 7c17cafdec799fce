import math
from dataclasses import dataclass, field

import numpy as np
import pytest

from memory_tree.domain.models import LandmarkFrame


@dataclass
class FakeHandle:
    """Minimal render handle: just the three transform vectors."""
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    scale: np.ndarray = field(default_factory=lambda: np.ones(3))


WRIST_AT = (0.5, 0.8)
_TIP_ANGLES = (-60, -80, -100, -120)     # degrees, fingers pointing up the image


def build_landmarks(openness=0.30, pinch=0.30, palm=(0.5, 0.5)):
    """
    21 (x, y) points where the four non-thumb tips sit exactly
    ``openness`` from the wrist and the thumb tip sits ``pinch`` from
    the index tip.
    """
    wx, wy = WRIST_AT
    points = [(wx, wy)] * 21
    for tip, deg in zip((8, 12, 16, 20), _TIP_ANGLES):
        a = math.radians(deg)
        points[tip] = (wx + openness * math.cos(a), wy + openness * math.sin(a))
    ix, iy = points[8]
    points[4] = (ix + pinch, iy)
    points[9] = palm
    return points


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def make_handle():
    def _make(scale=1.0):
        return FakeHandle(scale=np.full(3, float(scale)))
    return _make


@pytest.fixture
def landmarks():
    return build_landmarks


@pytest.fixture
def frame_factory():
    """Landmark frames with increasing timestamps."""
    clock = {"t": 0.0}

    def _make(landmarks=None, timestamp=None):
        if timestamp is None:
            clock["t"] += 1.0
            timestamp = clock["t"]
        return LandmarkFrame(landmarks, timestamp)
    return _make
