import math

import pytest

from cubescan.messages import Header, LaserScan, Marker
from cubescan.simple_detector import (
    SimpleCubeDetector,
    SimpleDetectorConfig,
)


def wall_scan(distance=1.0, beams=31, angle_min=-0.15, step=0.01):
    angles = [angle_min + i * step for i in range(beams)]
    return LaserScan(
        header=Header(stamp=3.0, frame_id="laser"),
        angle_min=angle_min,
        angle_max=angles[-1],
        angle_increment=step,
        range_min=0.1,
        range_max=10.0,
        ranges=[distance / math.cos(a) for a in angles],
    )


def test_detects_wall_segment():
    detector = SimpleCubeDetector()
    result = detector.process(wall_scan())
    assert result is not None
    assert result.centroid[0] == pytest.approx(1.0, abs=0.01)
    assert result.centroid[1] == pytest.approx(0.0, abs=1e-6)
    assert abs(abs(result.angle) - math.pi / 2) < 1e-6


def test_pose_and_marker_follow_source_layout():
    detector = SimpleCubeDetector()
    scan = wall_scan()
    result = detector.process(scan)
    assert result.pose.header == scan.header
    assert result.pose.pose.position[2] == 0.0
    x, y, z, w = result.pose.pose.orientation
    assert (x, y) == (0.0, 0.0)
    assert z * z + w * w == pytest.approx(1.0)
    assert result.marker.ns == "cube"
    assert result.marker.type == Marker.CUBE
    assert result.marker.pose.position[2] == pytest.approx(detector.config.cube_size / 2)
    assert result.marker.scale == (0.3, 0.3, 0.3)
    assert result.marker.lifetime == 0.5


def test_too_few_points_gives_none():
    detector = SimpleCubeDetector()
    assert detector.process(wall_scan(beams=3)) is None


def test_points_outside_fov_are_ignored():
    detector = SimpleCubeDetector()
    scan = wall_scan(angle_min=1.0)
    assert detector.process(scan) is None


def test_infinite_ranges_are_ignored():
    detector = SimpleCubeDetector()
    scan = wall_scan()
    scan.ranges = [math.inf] * len(scan.ranges)
    assert detector.process(scan) is None


def test_find_neighbors_excludes_self():
    detector = SimpleCubeDetector()
    points = [(0.0, 0.0), (0.05, 0.0), (1.0, 0.0)]
    assert detector.find_neighbors(points, 0) == [1]
    assert detector.find_neighbors(points, 2) == []


def test_expand_cluster_only_grows_through_dense_points():
    detector = SimpleCubeDetector(SimpleDetectorConfig(cluster_threshold=0.12))
    points = [(i * 0.05, 0.0) for i in range(11)]
    processed = [False] * len(points)
    cluster = detector.expand_cluster(points, processed, 0)
    assert cluster == points[:3]
    assert processed == [True] * 3 + [False] * 8


def test_expand_cluster_grows_with_low_density_requirement():
    detector = SimpleCubeDetector(
        SimpleDetectorConfig(cluster_threshold=0.12, min_points_per_cluster=2)
    )
    points = [(i * 0.05, 0.0) for i in range(11)]
    processed = [False] * len(points)
    cluster = detector.expand_cluster(points, processed, 0)
    assert sorted(cluster) == points
    assert all(processed)


def test_best_cluster_matches_perimeter():
    detector = SimpleCubeDetector()
    short = [(0.0, y * 0.1) for y in range(4)]
    long = [(1.0, y * 0.1) for y in range(7)]
    assert detector.best_cluster([short, long]) is long
    assert detector.best_cluster([]) is None


def test_estimate_pose_on_x_axis():
    detector = SimpleCubeDetector()
    result = detector.estimate_pose([(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)], Header())
    assert result.centroid == pytest.approx((1.0, 0.0))
    assert abs(math.sin(result.angle)) < 1e-9