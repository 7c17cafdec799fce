"""
Hand gesture detectors
"""

from .base import Gesture
from .openness import OpennessGesture
from .pinch import PinchGesture

__all__ = [
    'Gesture',
    'OpennessGesture',
    'PinchGesture',
]
