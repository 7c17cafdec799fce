"""
ModeStateMachine — the single place where the global mode changes.

Transitions are instantaneous at the data level: targets change right
away, the visible motion comes from each object's easing.
"""
from __future__ import annotations
from typing import Optional, Union

import numpy as np

from memory_tree.core.animated_object import AnimatedObject
from memory_tree.core.choreographer import Choreographer
from memory_tree.domain.enums import Mode
from memory_tree.domain.models import SceneContext


class ModeStateMachine:
    """
    Parameters
    ----------
    choreographer : Choreographer
    context : SceneContext
        Holds ``mode`` and ``focus_subject``; mutated in place.
    rng : numpy.random.Generator, optional
        Used for random focus selection.
    """

    def __init__(
        self,
        choreographer: Choreographer,
        context: SceneContext,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self._choreographer = choreographer
        self._context = context
        self._rng = rng if rng is not None else np.random.default_rng()

    @property
    def mode(self) -> Mode:
        return self._context.mode

    @property
    def focus_subject(self) -> Optional[AnimatedObject]:
        return self._context.focus_subject

    # ------------------------------------------------------------------
    def set_mode(self, mode: Union[Mode, str]) -> Mode:
        """
        Switch to ``mode`` and return the mode actually entered.

        Re-entering the current mode does nothing. FOCUS picks a random
        photo; with no photos it falls back to TREE. Unknown values raise
        ValueError.
        """
        mode = Mode(mode)
        with self._choreographer.lock:
            if mode == self._context.mode:
                return mode

            if mode is Mode.FOCUS:
                photos = self._choreographer.photos()
                if not photos:
                    return self.set_mode(Mode.TREE)
                subject = photos[int(self._rng.integers(len(photos)))]
                self._enter_focus(subject)
                return Mode.FOCUS

            # context first: objects added during the layout call see the new mode
            self._context.mode = mode
            self._context.focus_subject = None
            if mode is Mode.TREE:
                self._choreographer.apply_tree()
            else:
                self._choreographer.apply_scatter()
            return mode

    def focus_on(self, subject: AnimatedObject) -> bool:
        """
        Explicit focus selection. Works from any mode, including FOCUS
        itself, where it moves the spotlight to ``subject``.
        Returns False (and changes nothing) if ``subject`` is not a
        known photo.
        """
        with self._choreographer.lock:
            if subject is self._context.focus_subject and self._context.mode is Mode.FOCUS:
                return True
            return self._enter_focus(subject)

    def focus_latest_photo(self) -> bool:
        """Focus the most recently added photo; falls back to TREE if there is none."""
        with self._choreographer.lock:
            photos = self._choreographer.photos()
            if not photos:
                self.set_mode(Mode.TREE)
                return False
            return self.focus_on(photos[-1])

    def reset(self) -> None:
        """Return to TREE unconditionally and drop the focus subject."""
        with self._choreographer.lock:
            self._context.mode = Mode.TREE
            self._context.focus_subject = None
            self._choreographer.apply_tree()

    # ------------------------------------------------------------------
    def _enter_focus(self, subject: AnimatedObject) -> bool:
        if subject is None or not subject.is_photo or subject not in self._choreographer:
            return False
        self._context.mode = Mode.FOCUS
        self._context.focus_subject = subject
        return self._choreographer.apply_focus(subject)
