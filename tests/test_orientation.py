import numpy as np
import pytest

from memory_tree.core.orientation import OrientationController
from memory_tree.domain.enums import Mode
from memory_tree.domain.models import HandSignal, SceneContext


@pytest.fixture
def controller():
    return OrientationController()


def test_focus_eases_back_to_neutral(controller):
    controller.rotation[:] = (1.0, -2.0, 0.5)
    signal = HandSignal(present=True, x=1.0, y=1.0)
    context = SceneContext(mode=Mode.FOCUS, hand_signal=signal, gesture_enabled=True)

    controller.update(context)

    np.testing.assert_allclose(controller.rotation, [0.9, -1.8, 0.45])


def test_hand_steers_yaw_and_pitch(controller):
    context = SceneContext(hand_signal=HandSignal(present=True, x=1.0, y=1.0), gesture_enabled=True)
    controller.update(context)

    pitch, yaw, roll = controller.rotation
    assert yaw == pytest.approx(0.2)      # target 2 rad, blend 0.1
    assert pitch == pytest.approx(0.1)    # target 1 rad
    assert roll == 0.0


def test_hand_converges_to_pointer_target(controller):
    context = SceneContext(hand_signal=HandSignal(present=True, x=0.25, y=0.75), gesture_enabled=True)
    for _ in range(300):
        controller.update(context)

    assert controller.rotation[1] == pytest.approx(-1.0)
    assert controller.rotation[0] == pytest.approx(0.5)


@pytest.mark.parametrize("present, enabled", [(False, True), (True, False)])
def test_idle_auto_rotates_and_levels(controller, present, enabled):
    controller.rotation[:] = (0.4, 1.0, 0.0)
    context = SceneContext(hand_signal=HandSignal(present=present, x=1.0, y=1.0), gesture_enabled=enabled)

    controller.update(context)

    assert controller.rotation[1] == pytest.approx(1.002)
    assert controller.rotation[0] == pytest.approx(0.38)


def test_reset(controller):
    controller.rotation[:] = (0.3, 0.2, 0.1)
    controller.reset()
    np.testing.assert_array_equal(controller.rotation, [0, 0, 0])
