"""
Tests for ModeStateMachine transitions, idempotence and the
focus fallback.
"""
import threading
import time

import numpy as np
import pytest

from memory_tree.core.choreographer import Choreographer
from memory_tree.core.mode_machine import ModeStateMachine
from memory_tree.domain.enums import Mode, Role
from memory_tree.domain.models import SceneContext


@pytest.fixture
def context():
    return SceneContext()


@pytest.fixture
def choreographer(rng):
    return Choreographer(rng=rng)


@pytest.fixture
def machine(choreographer, context, rng):
    return ModeStateMachine(choreographer, context, rng=rng)


def _snapshot(choreographer):
    return [(o.target.position.copy(), o.target.rotation.copy(), o.target.scale.copy())
            for o in choreographer.objects]


def _assert_same(before, after):
    for (p0, r0, s0), (p1, r1, s1) in zip(before, after):
        np.testing.assert_array_equal(p0, p1)
        np.testing.assert_array_equal(r0, r1)
        np.testing.assert_array_equal(s0, s1)


class TestTransitions:

    def test_initial_mode_is_tree(self, machine):
        assert machine.mode is Mode.TREE
        assert machine.focus_subject is None

    def test_string_modes_accepted(self, machine):
        assert machine.set_mode("SCATTER") is Mode.SCATTER
        assert machine.mode is Mode.SCATTER

    def test_unknown_mode_rejected(self, machine):
        with pytest.raises(ValueError):
            machine.set_mode("SPIRAL")
        assert machine.mode is Mode.TREE

    @pytest.mark.parametrize("mode", [Mode.SCATTER, Mode.FOCUS])
    def test_set_mode_twice_is_idempotent(self, machine, choreographer, context, make_handle, mode):
        choreographer.add_objects([make_handle() for _ in range(5)], Role.DECORATION, context)
        choreographer.add_objects([make_handle() for _ in range(3)], Role.PHOTO, context)

        machine.set_mode(mode)
        subject = machine.focus_subject
        before = _snapshot(choreographer)
        machine.set_mode(mode)

        _assert_same(before, _snapshot(choreographer))
        assert machine.focus_subject is subject

    def test_leaving_focus_clears_subject(self, machine, choreographer, context, make_handle):
        choreographer.add_object(make_handle(), Role.PHOTO, context)
        machine.set_mode(Mode.FOCUS)
        assert machine.focus_subject is not None

        machine.set_mode(Mode.SCATTER)
        assert machine.focus_subject is None


class TestFocus:

    def test_focus_without_photos_falls_back_to_tree(self, machine, choreographer, context, make_handle):
        choreographer.add_objects([make_handle() for _ in range(10)], Role.DECORATION, context)

        assert machine.set_mode(Mode.FOCUS) is Mode.TREE
        assert machine.mode is Mode.TREE
        assert machine.focus_subject is None

    def test_focus_fallback_from_scatter_reapplies_tree(self, machine, choreographer, context, make_handle):
        choreographer.add_objects([make_handle() for _ in range(10)], Role.DECORATION, context)
        machine.set_mode(Mode.SCATTER)
        machine.set_mode(Mode.FOCUS)

        assert machine.mode is Mode.TREE
        for i, obj in enumerate(choreographer.objects):
            assert obj.target.position[1] == pytest.approx(40 * i / 10 - 20)

    def test_focus_picks_a_photo(self, machine, choreographer, context, make_handle):
        choreographer.add_objects([make_handle() for _ in range(4)], Role.DECORATION, context)
        photos = choreographer.add_objects([make_handle() for _ in range(3)], Role.PHOTO, context)

        machine.set_mode(Mode.FOCUS)

        assert machine.focus_subject in photos
        np.testing.assert_allclose(machine.focus_subject.target.position, [0, 2, 40])

    def test_random_focus_reaches_every_photo(self, machine, choreographer, context, make_handle):
        photos = choreographer.add_objects([make_handle() for _ in range(3)], Role.PHOTO, context)
        chosen = set()
        for _ in range(60):
            machine.set_mode(Mode.FOCUS)
            chosen.add(id(machine.focus_subject))
            machine.set_mode(Mode.TREE)
        assert chosen == {id(p) for p in photos}

    def test_focus_on_switches_subject_inside_focus(self, machine, choreographer, context, make_handle):
        first, second = choreographer.add_objects([make_handle(), make_handle()], Role.PHOTO, context)
        assert machine.focus_on(first)
        assert machine.focus_on(second)

        assert machine.mode is Mode.FOCUS
        assert machine.focus_subject is second
        np.testing.assert_allclose(second.target.position, [0, 2, 40])
        assert np.linalg.norm(first.target.position) >= 16 - 1e-9

    def test_focus_on_decoration_refused(self, machine, choreographer, context, make_handle):
        decoration = choreographer.add_object(make_handle(), Role.DECORATION, context)
        assert machine.focus_on(decoration) is False
        assert machine.mode is Mode.TREE

    def test_focus_latest_photo(self, machine, choreographer, context, make_handle):
        photos = choreographer.add_objects([make_handle() for _ in range(3)], Role.PHOTO, context)
        assert machine.focus_latest_photo()
        assert machine.focus_subject is photos[-1]

    def test_focus_latest_photo_without_photos(self, machine):
        machine.set_mode(Mode.SCATTER)
        assert machine.focus_latest_photo() is False
        assert machine.mode is Mode.TREE


class TestReset:

    def test_reset_from_focus(self, machine, choreographer, context, make_handle):
        choreographer.add_object(make_handle(), Role.PHOTO, context)
        machine.set_mode(Mode.FOCUS)
        machine.reset()

        assert machine.mode is Mode.TREE
        assert machine.focus_subject is None
        assert choreographer.objects[0].target.position[1] == pytest.approx(-20)


class TestConcurrentAdds:

    def test_add_during_layout_sees_new_mode(self, machine, choreographer, context, make_handle, monkeypatch):
        choreographer.add_objects([make_handle() for _ in range(5)], Role.DECORATION, context)
        machine.set_mode(Mode.SCATTER)
        added = []
        real_apply_tree = choreographer.apply_tree

        def apply_tree_then_add():
            real_apply_tree()
            added.append(choreographer.add_object(make_handle(), Role.DECORATION, context))

        monkeypatch.setattr(choreographer, "apply_tree", apply_tree_then_add)
        machine.set_mode(Mode.TREE)

        assert machine.mode is Mode.TREE
        assert np.any(added[0].target.rotation != 0)    # tree targets always tilt

    def test_add_from_other_thread_waits_for_transition(self, machine, choreographer, context, make_handle,
                                                        monkeypatch):
        choreographer.add_objects([make_handle() for _ in range(5)], Role.DECORATION, context)
        machine.set_mode(Mode.SCATTER)
        started = threading.Event()
        added = []
        real_apply_tree = choreographer.apply_tree

        def add_from_ui():
            started.set()
            added.append(choreographer.add_object(make_handle(), Role.DECORATION, context))

        worker = threading.Thread(target=add_from_ui)

        def apply_tree_with_racing_add():
            real_apply_tree()
            worker.start()
            started.wait(1.0)
            time.sleep(0.05)

        monkeypatch.setattr(choreographer, "apply_tree", apply_tree_with_racing_add)
        machine.set_mode(Mode.TREE)
        worker.join(1.0)

        assert len(choreographer) == 6
        assert np.any(added[0].target.rotation != 0)

    def test_reset_commits_tree_before_layout(self, machine, choreographer, context, make_handle, monkeypatch):
        choreographer.add_object(make_handle(), Role.PHOTO, context)
        machine.set_mode(Mode.FOCUS)
        seen = []
        real_apply_tree = choreographer.apply_tree

        def apply_tree_and_record():
            seen.append((context.mode, context.focus_subject))
            real_apply_tree()

        monkeypatch.setattr(choreographer, "apply_tree", apply_tree_and_record)
        machine.reset()

        assert seen == [(Mode.TREE, None)]
