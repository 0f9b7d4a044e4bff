import math

import pytest

from cubescan.animation import KeyFrame, PoseAnimation, spin_animation


def _yaw(pose):
    _, _, z, w = pose.orientation
    return 2.0 * math.atan2(z, w)


def _line():
    return PoseAnimation(
        name="line",
        length=10.0,
        loop=False,
        keyframes=(
            KeyFrame(10.0, (4.0, -2.0, 0.0)),
            KeyFrame(0.0, (0.0, 0.0, 0.0)),
        ),
    )


def test_spin_animation_metadata():
    anim = spin_animation()
    assert anim.name == "move"
    assert anim.length == 40.0
    assert anim.loop is True
    assert [f.time for f in anim.keyframes] == [0.0, 20.0, 40.0]


def test_spin_half_turn_at_twenty_seconds():
    pose = spin_animation().pose_at(20.0)
    assert _yaw(pose) == pytest.approx(3.141592, abs=1e-6)
    assert pose.position == (0.0, 0.0, 0.0)


def test_spin_quarter_turn_is_half_of_half_turn():
    anim = spin_animation()
    assert _yaw(anim.pose_at(10.0)) == pytest.approx(_yaw(anim.pose_at(20.0)) / 2.0)


def test_spin_loops():
    anim = spin_animation()
    a = anim.pose_at(7.0)
    b = anim.pose_at(47.0)
    assert a.orientation == pytest.approx(b.orientation)


def test_orientation_is_unit_quaternion():
    anim = spin_animation()
    for t in (0.0, 3.3, 13.0, 27.5, 39.9):
        q = anim.pose_at(t).orientation
        assert sum(c * c for c in q) == pytest.approx(1.0)


def test_keyframes_sorted_and_linear_translation():
    anim = _line()
    assert [f.time for f in anim.keyframes] == [0.0, 10.0]
    mid = anim.pose_at(5.0)
    assert mid.position == pytest.approx((2.0, -1.0, 0.0))


def test_non_looping_clamps_time():
    anim = _line()
    assert anim.pose_at(25.0).position == pytest.approx((4.0, -2.0, 0.0))
    assert anim.pose_at(-3.0).position == pytest.approx((0.0, 0.0, 0.0))


def test_keyframe_orientation_identity():
    assert KeyFrame(0.0).orientation == pytest.approx((0.0, 0.0, 0.0, 1.0))


@pytest.mark.parametrize("length", [0.0, -5.0])
def test_non_positive_length_rejected(length):
    with pytest.raises(ValueError):
        PoseAnimation(name="bad", length=length)


def test_pose_without_keyframes_rejected():
    with pytest.raises(ValueError):
        PoseAnimation(name="empty", length=5.0).pose_at(1.0)