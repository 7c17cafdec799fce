"""Gesture-driven choreography of a 3D tree of decorations and photos."""

__version__ = "0.1.0"
