"""
Geometry helpers and named constants for the choreography core.
"""

from .constants import *
from .geometry import approach, dist, euler_matrix, mean_dist, spherical

__all__ = [
    'approach',
    'dist',
    'euler_matrix',
    'mean_dist',
    'spherical',
    'EASE_FACTOR',
    'PINCH_THRESHOLD',
    'FIST_THRESHOLD',
    'OPEN_THRESHOLD',
    'FOCUS_ANCHOR',
    'CAMERA_POSITION',
]
