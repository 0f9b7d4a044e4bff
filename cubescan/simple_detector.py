"""A simpler cube detector that scores clusters by their bounding box."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import dataclass
from typing import Optional, Sequence

import numpy as np

from .messages import Header, LaserScan, Marker, Pose, PoseStamped, yaw_quaternion

logger = logging.getLogger(__name__)

Point = tuple[float, float]


@dataclass
class SimpleDetectorConfig:
    """Tunable parameters of the simple detector."""

    cube_size: float = 0.3
    fov_angle: float = 90.0
    cluster_threshold: float = 0.1
    min_points_per_cluster: int = 5


@dataclass
class SimpleDetection:
    """Pose and marker estimated for the chosen cluster."""

    pose: PoseStamped
    marker: Marker
    centroid: Point
    angle: float


class SimpleCubeDetector:
    """Picks the cluster whose bounding-box perimeter best matches a cube."""

    def __init__(self, config: Optional[SimpleDetectorConfig] = None) -> None:
        self.config = config if config is not None else SimpleDetectorConfig()
        logger.info(
            "simple cube detector initialised with cube size %.2f m",
            self.config.cube_size,
        )

    def _extract_points(self, scan: LaserScan) -> list[Point]:
        half_fov = math.radians(self.config.fov_angle / 2.0)
        points = []
        for angle, rng in zip(scan.angles(), scan.ranges):
            if abs(angle) > half_fov:
                continue
            if not math.isfinite(rng) or rng < scan.range_min or rng > scan.range_max:
                continue
            points.append((rng * math.cos(angle), rng * math.sin(angle)))
        return points

    def process(self, scan: LaserScan) -> Optional[SimpleDetection]:
        """Run detection on one scan; ``None`` when nothing is found."""
        points = self._extract_points(scan)
        min_points = self.config.min_points_per_cluster
        if len(points) < min_points:
            logger.debug("not enough valid points in field of view")
            return None

        processed = [False] * len(points)
        clusters = []
        for index, _ in enumerate(points):
            if processed[index]:
                continue
            cluster = self.expand_cluster(points, processed, index)
            if len(cluster) >= min_points:
                clusters.append(cluster)

        if not clusters:
            logger.debug("no valid clusters found")
            return None

        best = self.best_cluster(clusters)
        if best is None:
            logger.debug("no suitable cube candidate found")
            return None
        return self.estimate_pose(best, scan.header)

    def find_neighbors(self, points: Sequence[Point], index: int) -> list[int]:
        """Indices of the points within the cluster threshold of ``points[index]``."""
        px, py = points[index]
        return [
            i
            for i, (x, y) in enumerate(points)
            if i != index and math.hypot(x - px, y - py) <= self.config.cluster_threshold
        ]

    def expand_cluster(
        self, points: Sequence[Point], processed: list[bool], index: int
    ) -> list[Point]:
        """Grow a cluster from ``points[index]``, marking members in ``processed``."""
        processed[index] = True
        cluster = [points[index]]
        initial = self.find_neighbors(points, index)
        queued = set(initial)
        pending = deque(initial)
        while pending:
            neighbor = pending.popleft()
            if processed[neighbor]:
                continue
            processed[neighbor] = True
            second = self.find_neighbors(points, neighbor)
            if len(second) >= self.config.min_points_per_cluster:
                for candidate in second:
                    if candidate not in queued:
                        queued.add(candidate)
                        pending.append(candidate)
            cluster.append(points[neighbor])
        return cluster

    def best_cluster(
        self, clusters: Sequence[Sequence[Point]]
    ) -> Optional[Sequence[Point]]:
        """The cluster whose bounding-box perimeter is closest to a cube's."""
        expected = 4 * self.config.cube_size
        best = None
        best_score = math.inf
        for cluster in clusters:
            if not cluster:
                continue
            xs = [x for x, _ in cluster]
            ys = [y for _, y in cluster]
            actual = 2 * ((max(xs) - min(xs)) + (max(ys) - min(ys)))
            score = abs(expected - actual)
            if score < best_score:
                best_score = score
                best = cluster
        return best

    def estimate_pose(
        self, cluster: Sequence[Point], header: Header
    ) -> SimpleDetection:
        """Centroid and principal-axis orientation of the cluster."""
        pts = np.array(cluster, dtype=float)
        centre = pts.mean(axis=0)
        centred = pts - centre
        cov = centred.T @ centred / len(pts)
        _, vectors = np.linalg.eigh(cov)
        axis = vectors[:, -1]
        angle = math.atan2(float(axis[1]), float(axis[0]))
        centroid = (float(centre[0]), float(centre[1]))
        orientation = yaw_quaternion(angle)

        pose = PoseStamped(
            header=header,
            pose=Pose(position=(centroid[0], centroid[1], 0.0), orientation=orientation),
        )
        size = self.config.cube_size
        marker = Marker(
            header=header,
            ns="cube",
            id=0,
            type=Marker.CUBE,
            action=Marker.ADD,
            pose=Pose(
                position=(centroid[0], centroid[1], size / 2.0),
                orientation=orientation,
            ),
            scale=(size, size, size),
            color=(0.0, 1.0, 0.0, 0.7),
            lifetime=0.5,
        )
        logger.info(
            "cube detected at (%.2f, %.2f) with rotation %.2f degrees",
            centroid[0],
            centroid[1],
            math.degrees(angle),
        )
        return SimpleDetection(pose=pose, marker=marker, centroid=centroid, angle=angle)