from enum import Enum


class Mode(str, Enum):
    """Global layout states of the composition."""
    TREE    = "TREE"
    SCATTER = "SCATTER"
    FOCUS   = "FOCUS"


class Role(str, Enum):
    """What an animated object represents. Fixed at creation."""
    DECORATION = "DECORATION"
    PHOTO      = "PHOTO"


class HandGesture(str, Enum):
    """Discrete gestures emitted by the classifier."""
    PINCH   = "PINCH"
    FIST    = "FIST"
    OPEN    = "OPEN"
    NONE    = "NONE"        # hand visible, inside the dead zone
    NO_HAND = "NO HAND"


class MotionMode(str, Enum):
    """How every object's rotation advances during one tick."""
    SEEKING   = "SEEKING"
    FREE_SPIN = "FREE_SPIN"
