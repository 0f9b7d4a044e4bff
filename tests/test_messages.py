import math

import pytest

from cubescan.messages import (
    Header,
    LaserScan,
    Marker,
    Pose,
    PoseStamped,
    yaw_quaternion,
)


def test_yaw_quaternion_identity():
    assert yaw_quaternion(0.0) == pytest.approx((0.0, 0.0, 0.0, 1.0))


def test_yaw_quaternion_half_turn():
    assert yaw_quaternion(math.pi) == pytest.approx((0.0, 0.0, 1.0, 0.0), abs=1e-12)


@pytest.mark.parametrize("angle", [-2.5, -0.3, 0.7, 1.9, 3.0])
def test_yaw_quaternion_is_unit(angle):
    q = yaw_quaternion(angle)
    assert sum(c * c for c in q) == pytest.approx(1.0)
    assert q[0] == 0.0 and q[1] == 0.0
    assert 2.0 * math.atan2(q[2], q[3]) == pytest.approx(angle)


def test_scan_angles_follow_increment():
    scan = LaserScan(angle_min=-0.5, angle_increment=0.25, ranges=[1.0] * 5)
    angles = scan.angles()
    assert len(angles) == len(scan.ranges)
    assert angles[0] == pytest.approx(-0.5)
    assert angles[-1] == pytest.approx(0.5)


def test_scan_angles_empty():
    assert LaserScan(angle_min=1.0, angle_increment=0.1).angles() == []


def test_defaults_are_independent():
    a = LaserScan()
    b = LaserScan()
    a.ranges.append(1.0)
    assert b.ranges == []
    assert PoseStamped().pose == Pose()
    assert Header().frame_id == ""


def test_marker_constants():
    m = Marker(type=Marker.CUBE, action=Marker.ADD)
    assert m.type == 1
    assert m.action == 0