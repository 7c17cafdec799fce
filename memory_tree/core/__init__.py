from memory_tree.core.animated_object import AnimatedObject, RenderHandle
from memory_tree.core.choreographer import Choreographer
from memory_tree.core.gesture_classifier import GestureClassifier
from memory_tree.core.mode_machine import ModeStateMachine
from memory_tree.core.orientation import OrientationController
from memory_tree.core.scene import SceneController
from memory_tree.core.state_stabilizer import StateStabilizer

__all__ = [
    "AnimatedObject",
    "RenderHandle",
    "Choreographer",
    "GestureClassifier",
    "ModeStateMachine",
    "OrientationController",
    "SceneController",
    "StateStabilizer",
]
