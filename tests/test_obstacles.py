import pytest

from cubescan import track_a, track_b, track_c
from cubescan.animation import spin_animation
from cubescan.obstacles import animation, animation_names


def test_names_in_order():
    names = animation_names()
    assert names == [f"obstacle{i}" for i in range(1, 14)] + ["obstacles"]


def test_every_name_resolves():
    for name in animation_names():
        assert animation(name).length > 0.0


def test_lookup_matches_tracks():
    expected = track_a.animations() + track_b.animations() + track_c.animations()
    for i, anim in enumerate(expected, start=1):
        assert animation(f"obstacle{i}") == anim


def test_first_and_thirteenth():
    assert animation("obstacle1").name == "move1"
    assert animation("obstacle1").length == 160.0
    assert animation("obstacle13").length == 345.0


def test_spinning_obstacle():
    spin = animation("obstacles")
    assert spin == spin_animation()
    assert spin.name == "move"
    assert spin.length == 40.0
    pose = spin.pose_at(20.0)
    assert pose.position == pytest.approx((0.0, 0.0, 0.0))
    assert pose.orientation[2] == pytest.approx(1.0, abs=1e-6)


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        animation("obstacle99")


def test_obstacle_seven_lookup():
    anim = animation("obstacle7")
    assert anim.name == "move7"
    assert anim.length == 195.0
    assert anim == track_b.animations()[1]