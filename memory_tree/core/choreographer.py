"""
Choreographer — owns the ordered collection of AnimatedObjects and
applies a layout to all (or one) of them.

Insertion order matters: in the tree layout the index sets the helix phase.
"""
from __future__ import annotations
import threading
from typing import Iterable, List, Optional, Tuple

import numpy as np

from memory_tree.core.animated_object import AnimatedObject, RenderHandle
from memory_tree.core.layouts import Placement, focus_target, scatter_target, tree_target
from memory_tree.domain.enums import Mode, MotionMode, Role
from memory_tree.domain.models import SceneContext
from memory_tree.utils.constants import EASE_FACTOR


def _apply(obj: AnimatedObject, placement: Placement) -> None:
    obj.set_target(placement.position, placement.rotation, placement.scale)


class Choreographer:
    """
    Parameters
    ----------
    rng : numpy.random.Generator, optional
        Shared by every layout call and every new object.
    ease : float
        Blend factor handed to new objects.

    Adding objects may happen from a UI callback while a tick iterates
    the collection, so both take the same lock. Callers that also update
    the scene context hold ``lock`` around the layout call.
    """

    def __init__(
        self,
        rng: Optional[np.random.Generator] = None,
        ease: float = EASE_FACTOR,
    ) -> None:
        self._rng  = rng if rng is not None else np.random.default_rng()
        self._ease = ease
        self._objects: List[AnimatedObject] = []
        self._lock = threading.RLock()

    # ---- collection ---------------------------------------------------
    @property
    def objects(self) -> Tuple[AnimatedObject, ...]:
        with self._lock:
            return tuple(self._objects)

    @property
    def lock(self):
        """Re-entrant lock guarding the collection; hold it to make a layout change atomic."""
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._objects)

    def __contains__(self, obj: object) -> bool:
        with self._lock:
            return obj in self._objects

    def photos(self) -> List[AnimatedObject]:
        """PHOTO objects in insertion order."""
        with self._lock:
            return [o for o in self._objects if o.is_photo]

    # ---- layouts ------------------------------------------------------
    def apply_tree(self) -> None:
        with self._lock:
            total = len(self._objects)
            for i, obj in enumerate(self._objects):
                _apply(obj, tree_target(i, total, obj.base_scale, self._rng))

    def apply_scatter(self) -> None:
        with self._lock:
            for obj in self._objects:
                _apply(obj, scatter_target(obj.base_scale, self._rng))

    def apply_focus(self, subject: AnimatedObject) -> bool:
        """
        Bring ``subject`` to the front and push everything else out.
        Refused (returns False, nothing changes) unless ``subject`` is a
        PHOTO held by this collection.
        """
        with self._lock:
            if subject is None or not subject.is_photo or subject not in self._objects:
                return False
            for obj in self._objects:
                _apply(obj, focus_target(obj is subject, obj.base_scale, self._rng))
            return True

    # ---- creation -----------------------------------------------------
    def _create(self, handle: RenderHandle, role: Role) -> AnimatedObject:
        obj = AnimatedObject(handle, role, rng=self._rng, ease=self._ease)
        _apply(obj, scatter_target(obj.base_scale, self._rng))
        obj.snap_to_target()
        return obj

    def add_object(
        self,
        handle: RenderHandle,
        role: Role,
        context: SceneContext,
    ) -> AnimatedObject:
        """
        Append a new object already placed on a scatter point, then aim it
        at the live layout of ``context.mode``.
        """
        obj = self._create(handle, Role(role))
        with self._lock:
            self._objects.append(obj)
            total = len(self._objects)

            if context.mode is Mode.TREE:
                slot = int(self._rng.integers(total))
                _apply(obj, tree_target(slot, total, obj.base_scale, self._rng))
            elif context.mode is Mode.FOCUS:
                is_subject = obj is context.focus_subject
                _apply(obj, focus_target(is_subject, obj.base_scale, self._rng))
        return obj

    def add_objects(
        self,
        handles: Iterable[RenderHandle],
        role: Role,
        context: SceneContext,
    ) -> List[AnimatedObject]:
        """Bulk add, then lay the whole collection out for the current mode."""
        created = [self._create(h, Role(role)) for h in handles]
        with self._lock:
            self._objects.extend(created)
            if context.mode is Mode.FOCUS:
                for obj in created:
                    _apply(obj, focus_target(False, obj.base_scale, self._rng))
            elif context.mode is Mode.TREE:
                self.apply_tree()
        return created

    # ------------------------------------------------------------------
    def tick(self, motion: MotionMode = MotionMode.SEEKING) -> None:
        with self._lock:
            for obj in self._objects:
                obj.tick(motion)
