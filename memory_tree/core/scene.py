"""
SceneController — owns the SceneContext and drives one tick per frame.

Tick order:
  1. Consume the newest landmark frame, if it is new (at most one mode change).
  2. Advance every animated object.
  3. Update the composition orientation.
The caller renders afterwards.

Everything outside the core goes through the mutation entry points on
this class: set_mode, add_object(s), add_photo, set_gesture_enabled,
reset_to_initial and submit_frame.
"""
from __future__ import annotations
import threading
from typing import Iterable, List, Optional, Union

import numpy as np

from memory_tree.core.animated_object import AnimatedObject, RenderHandle
from memory_tree.core.choreographer import Choreographer
from memory_tree.core.gesture_classifier import GESTURE_MODES, GestureClassifier
from memory_tree.core.mode_machine import ModeStateMachine
from memory_tree.core.orientation import OrientationController
from memory_tree.core.state_stabilizer import StateStabilizer
from memory_tree.domain.enums import Mode, Role
from memory_tree.domain.models import GestureReading, LandmarkFrame, SceneContext


class SceneController:
    """
    Parameters
    ----------
    choreographer, classifier, stabilizer, orientation : optional
        Injected collaborators; defaults are built when omitted.
    rng : numpy.random.Generator, optional
        Shared randomness for layouts and focus selection.
    """

    def __init__(
        self,
        choreographer: Optional[Choreographer] = None,
        classifier: Optional[GestureClassifier] = None,
        stabilizer: Optional[StateStabilizer] = None,
        orientation: Optional[OrientationController] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        rng = rng if rng is not None else np.random.default_rng()

        self.context       = SceneContext()
        self.choreographer = choreographer or Choreographer(rng=rng)
        self.classifier    = classifier or GestureClassifier()
        self.stabilizer    = stabilizer or StateStabilizer()
        self.orientation   = orientation or OrientationController()
        self.modes         = ModeStateMachine(self.choreographer, self.context, rng=rng)

        self._frame_lock = threading.Lock()
        self._pending: Optional[LandmarkFrame] = None
        self._last_timestamp: Optional[float] = None

    # ---- convenience accessors ----------------------------------------
    @property
    def mode(self) -> Mode:
        return self.context.mode

    @property
    def focus_subject(self) -> Optional[AnimatedObject]:
        return self.context.focus_subject

    @property
    def objects(self):
        return self.choreographer.objects

    # ---- mutation entry points ----------------------------------------
    def set_mode(self, mode: Union[Mode, str]) -> Mode:
        return self.modes.set_mode(mode)

    def add_object(self, handle: RenderHandle, role: Role = Role.DECORATION) -> AnimatedObject:
        return self.choreographer.add_object(handle, role, self.context)

    def add_objects(
        self,
        handles: Iterable[RenderHandle],
        role: Role = Role.DECORATION,
    ) -> List[AnimatedObject]:
        return self.choreographer.add_objects(handles, role, self.context)

    def add_photo(self, handle: RenderHandle) -> AnimatedObject:
        """Add a photo and put the newest photo in the spotlight straight away."""
        with self.choreographer.lock:
            photo = self.add_object(handle, Role.PHOTO)
            self.modes.focus_latest_photo()
        return photo

    def set_gesture_enabled(self, enabled: bool) -> None:
        self.context.gesture_enabled = bool(enabled)
        if not enabled:
            self.context.hand_signal.clear()
            self.stabilizer.reset()

    def reset_to_initial(self) -> None:
        """TREE, no focus subject, neutral orientation, no hand."""
        self.modes.reset()
        self.orientation.reset()
        self.context.hand_signal.clear()
        self.stabilizer.reset()
        self.classifier.reset()

    def submit_frame(self, frame: LandmarkFrame) -> None:
        """
        Hand over the newest vision result. Only the latest submission
        before a tick is consumed.
        """
        with self._frame_lock:
            self._pending = frame

    # ------------------------------------------------------------------
    def tick(self) -> Optional[GestureReading]:
        """Run one frame. Returns the reading of a consumed frame, else None."""
        reading = self._consume_frame()
        self.choreographer.tick(self.context.motion_mode)
        self.orientation.update(self.context)
        return reading

    def _consume_frame(self) -> Optional[GestureReading]:
        with self._frame_lock:
            frame, self._pending = self._pending, None

        if frame is None or frame.timestamp == self._last_timestamp:
            return None
        self._last_timestamp = frame.timestamp

        signal = self.context.hand_signal
        if not self.context.gesture_enabled:
            signal.clear()
            self.classifier.reset()
            return GestureReading.no_hand()

        reading = self.classifier.classify(frame.landmarks)
        if not reading.detected:
            signal.clear()
            self.stabilizer.reset()
            return reading

        signal.present = True
        signal.x, signal.y = reading.pointer

        stable = self.stabilizer.update(reading.gesture)
        requested = GESTURE_MODES.get(stable) if stable is not None else None
        if requested is not None:
            self.modes.set_mode(requested)
        return reading
