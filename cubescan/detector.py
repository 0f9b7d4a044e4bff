"""Detection of a cube face in a planar laser scan."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass, replace
from typing import Optional, Sequence

import numpy as np

from .messages import Header, LaserScan, Marker, Pose, PoseStamped, yaw_quaternion

logger = logging.getLogger(__name__)


@dataclass
class DetectorConfig:
    """Tunable parameters of the detector."""

    cube_size: float = 1.0
    size_tolerance: float = 0.2
    line_thickness_factor: float = 5.0
    fov_angle: float = 90.0
    cluster_threshold: float = 0.05
    min_points_per_cluster: int = 10
    enable_angle_smoothing: bool = True
    angle_smoothing_factor: float = 0.5


@dataclass(frozen=True)
class PointInfo:
    """A Cartesian scan point and the index of its beam in the scan."""

    index: int
    x: float
    y: float


@dataclass
class DetectionResult:
    """Outcome of processing one scan."""

    filtered_scan: LaserScan
    pose: Optional[PoseStamped] = None
    marker: Optional[Marker] = None
    centroid: Optional[tuple[float, float]] = None
    angle: Optional[float] = None

    @property
    def detected(self) -> bool:
        return self.pose is not None


def angle_difference(angle1: float, angle2: float) -> float:
    """Return ``angle1 - angle2`` wrapped into (-pi, pi]."""
    diff = angle1 - angle2
    while diff <= -math.pi:
        diff += 2.0 * math.pi
    while diff > math.pi:
        diff -= 2.0 * math.pi
    return diff


def extract_points(scan: LaserScan, fov_angle: float) -> list[PointInfo]:
    """Valid points of the scan inside the field of view (degrees)."""
    half_fov = math.radians(fov_angle / 2.0)
    points = []
    for index, (angle, rng) in enumerate(zip(scan.angles(), scan.ranges)):
        if angle < -half_fov or angle > half_fov:
            continue
        if (
            not math.isfinite(rng)
            or rng <= scan.range_min
            or rng >= scan.range_max
            or rng <= 1e-3
        ):
            continue
        points.append(PointInfo(index, rng * math.cos(angle), rng * math.sin(angle)))
    return points


def cluster_points(
    points: Sequence[PointInfo], threshold: float, min_points: int
) -> list[list[PointInfo]]:
    """Euclidean clustering by breadth-first search; small clusters are dropped."""
    threshold_sq = threshold * threshold
    visited = [False] * len(points)
    clusters = []
    for start, _ in enumerate(points):
        if visited[start]:
            continue
        visited[start] = True
        queue = deque([start])
        cluster = []
        while queue:
            current = queue.popleft()
            here = points[current]
            cluster.append(here)
            for j, other in enumerate(points):
                if visited[j]:
                    continue
                if (here.x - other.x) ** 2 + (here.y - other.y) ** 2 <= threshold_sq:
                    visited[j] = True
                    queue.append(j)
        if cluster and len(cluster) >= min_points:
            clusters.append(cluster)
    return clusters


def _centroid(cluster: Sequence[PointInfo]) -> tuple[float, float]:
    n = len(cluster)
    return (sum(p.x for p in cluster) / n, sum(p.y for p in cluster) / n)


def closest_cluster(
    clusters: Sequence[Sequence[PointInfo]],
) -> Optional[tuple[Sequence[PointInfo], tuple[float, float]]]:
    """The cluster whose centroid is nearest the origin, with that centroid."""
    best = None
    best_dist_sq = math.inf
    for cluster in clusters:
        if not cluster:
            continue
        centroid = _centroid(cluster)
        dist_sq = centroid[0] ** 2 + centroid[1] ** 2
        if dist_sq < best_dist_sq:
            best_dist_sq = dist_sq
            best = (cluster, centroid)
    return best


def check_shape(cluster: Sequence[PointInfo], config: DetectorConfig) -> bool:
    """Whether the cluster spans one cube face and lies close to a line."""
    if len(cluster) < 2:
        logger.debug("cluster too small (%d points) for a shape check", len(cluster))
        return False

    pts = np.array([(p.x, p.y) for p in cluster], dtype=float)
    diff = pts[:, None, :] - pts[None, :, :]
    dist_sq = (diff**2).sum(axis=-1)
    rows, cols = np.triu_indices(len(pts), k=1)
    pair_dist = dist_sq[rows, cols]
    best = int(np.argmax(pair_dist))
    max_dist_sq = float(pair_dist[best])
    idx1, idx2 = int(rows[best]), int(cols[best])

    if max_dist_sq <= 1e-9:
        logger.warning(
            "no distinct farthest points in cluster of %d (max_dist_sq=%.1E)",
            len(cluster),
            max_dist_sq,
        )
        return False

    max_dist = math.sqrt(max_dist_sq)
    lower = config.cube_size * (1.0 - config.size_tolerance)
    upper = config.cube_size * (1.0 + config.size_tolerance)
    if not lower <= max_dist <= upper:
        logger.debug(
            "span check failed: %.3f m not in [%.3f, %.3f]", max_dist, lower, upper
        )
        return False

    p1 = pts[idx1]
    line = pts[idx2] - p1
    line_norm_sq = float(line @ line)
    if line_norm_sq < 1e-9:
        logger.warning("degenerate line in linearity check")
        return False

    mask = np.ones(len(pts), dtype=bool)
    mask[[idx1, idx2]] = False
    rel = pts[mask] - p1
    cross = line[0] * rel[:, 1] - line[1] * rel[:, 0]
    max_dev_sq = float((cross**2 / line_norm_sq).max()) if len(rel) else 0.0
    max_dev = math.sqrt(max_dev_sq)
    threshold = config.cluster_threshold * config.line_thickness_factor
    if max_dev < threshold:
        logger.debug("shape check passed (span=%.3f, deviation=%.4f)", max_dist, max_dev)
        return True
    logger.debug("linearity check failed (deviation=%.4f >= %.4f)", max_dev, threshold)
    return False


def principal_angle(
    cluster: Sequence[PointInfo], centroid: tuple[float, float]
) -> float:
    """Angle of the first principal axis of the cluster, in radians."""
    pts = np.array([(p.x, p.y) for p in cluster], dtype=float)
    centred = pts - np.asarray(centroid, dtype=float)
    cov = centred.T @ centred
    if len(pts) > 1:
        cov /= len(pts) - 1
    _, vectors = np.linalg.eigh(cov)
    axis = vectors[:, -1]
    return math.atan2(float(axis[1]), float(axis[0]))


def filtered_scan(cluster: Sequence[PointInfo], scan: LaserScan) -> LaserScan:
    """A copy of the scan that keeps only the ranges of the cluster's beams."""
    ranges = [math.inf] * len(scan.ranges)
    intensities = [0.0] * len(scan.intensities)
    for point in cluster:
        if point.index >= len(ranges):
            logger.warning(
                "point index %d outside scan of size %d", point.index, len(ranges)
            )
            continue
        ranges[point.index] = scan.ranges[point.index]
        if point.index < len(intensities):
            intensities[point.index] = scan.intensities[point.index]
    return replace(scan, ranges=ranges, intensities=intensities)


class CubeDetector:
    """Finds the nearest cube face in successive scans and estimates its pose."""

    def __init__(self, config: Optional[DetectorConfig] = None) -> None:
        self.config = config if config is not None else DetectorConfig()
        self._last_angle: Optional[float] = None

    def reset(self) -> None:
        """Forget the smoothed angle."""
        self._last_angle = None

    def _reject(self, scan: LaserScan) -> DetectionResult:
        if self.config.enable_angle_smoothing:
            self.reset()
        return DetectionResult(filtered_scan=filtered_scan([], scan))

    def _smooth(self, angle: float) -> float:
        if self._last_angle is not None:
            diff = angle_difference(angle, self._last_angle)
            angle = self._last_angle + (1.0 - self.config.angle_smoothing_factor) * diff
            angle = math.atan2(math.sin(angle), math.cos(angle))
        self._last_angle = angle
        return angle

    def process(self, scan: LaserScan) -> DetectionResult:
        """Run detection on one scan."""
        cfg = self.config
        points = extract_points(scan, cfg.fov_angle)
        if len(points) < cfg.min_points_per_cluster:
            logger.debug("not enough valid points in field of view: %d", len(points))
            return self._reject(scan)

        clusters = cluster_points(points, cfg.cluster_threshold, cfg.min_points_per_cluster)
        found = closest_cluster(clusters)
        if found is None:
            logger.debug("no valid cluster found")
            return self._reject(scan)
        cluster, centroid = found

        if not check_shape(cluster, cfg):
            return self._reject(scan)

        try:
            angle = principal_angle(cluster, centroid)
        except np.linalg.LinAlgError:
            logger.warning("eigen decomposition failed; skipping pose estimate")
            return self._reject(scan)

        if cfg.enable_angle_smoothing:
            angle = self._smooth(angle)

        logger.info(
            "cube detected at (%.2f, %.2f), rotation %.1f degrees",
            centroid[0],
            centroid[1],
            math.degrees(angle),
        )
        return DetectionResult(
            filtered_scan=filtered_scan(cluster, scan),
            pose=self.pose_for(centroid, angle, scan.header),
            marker=self.marker_for(centroid, angle, scan.header),
            centroid=centroid,
            angle=angle,
        )

    def pose_for(
        self, centroid: tuple[float, float], angle: float, header: Header
    ) -> PoseStamped:
        """Pose of a cube on the ground at the centroid, rotated by ``angle``."""
        return PoseStamped(
            header=header,
            pose=Pose(
                position=(centroid[0], centroid[1], 0.0),
                orientation=yaw_quaternion(angle),
            ),
        )

    def marker_for(
        self, centroid: tuple[float, float], angle: float, header: Header
    ) -> Marker:
        """A translucent green cube marker at the detected pose."""
        size = self.config.cube_size
        return Marker(
            header=header,
            ns="cube_detector",
            id=0,
            type=Marker.CUBE,
            action=Marker.ADD,
            pose=Pose(
                position=(centroid[0], centroid[1], 0.0),
                orientation=yaw_quaternion(angle),
            ),
            scale=(size, size, size),
            color=(0.0, 1.0, 0.0, 0.7),
            lifetime=0.5,
        )