"""
StateStabilizer — temporal filter that turns noisy per-frame gestures
into confirmed ones.

With the defaults (window=1, consensus=1) every gesture is confirmed
immediately; widen the window to debounce a jittery detector.
"""
from __future__ import annotations
from collections import deque, Counter
from typing import Deque, Optional

from memory_tree.domain.enums import HandGesture


class StateStabilizer:
    """
    Accumulates gestures into a rolling window and returns a stable one
    only when a clear consensus is reached.

    Parameters
    ----------
    window : int
        Number of frames kept in the rolling buffer.
    consensus : int
        Minimum occurrences of the dominant gesture required to confirm it.
    """

    def __init__(self, window: int = 1, consensus: int = 1) -> None:
        if not 1 <= consensus <= window:
            raise ValueError("consensus must be between 1 and window")
        self._window = window
        self._consensus = consensus
        self._buffer: Deque[HandGesture] = deque(maxlen=window)
        self._current: Optional[HandGesture] = None

    # ------------------------------------------------------------------
    def update(self, gesture: HandGesture) -> Optional[HandGesture]:
        """
        Feed a new gesture.

        Returns the consensus gesture once the buffer is full and one
        gesture dominates, otherwise None. The last confirmed gesture is
        cached in ``current``.
        """
        self._buffer.append(gesture)

        if len(self._buffer) < self._window:
            return None

        most_common, count = Counter(self._buffer).most_common(1)[0]
        if count >= self._consensus:
            self._current = most_common
            return most_common

        return None  # no consensus yet

    @property
    def current(self) -> Optional[HandGesture]:
        """The last confirmed gesture, or None if not yet settled."""
        return self._current

    def reset(self) -> None:
        self._buffer.clear()
        self._current = None
