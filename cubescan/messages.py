"""Plain message types for laser scans, poses and visualisation markers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import ClassVar


def yaw_quaternion(angle: float) -> tuple[float, float, float, float]:
    """Return the (x, y, z, w) quaternion of a rotation by ``angle`` about Z."""
    half = angle / 2.0
    return (0.0, 0.0, math.sin(half), math.cos(half))


@dataclass
class Header:
    """Timestamp and coordinate frame of a message."""

    stamp: float = 0.0
    frame_id: str = ""


@dataclass
class LaserScan:
    """A planar range scan."""

    header: Header = field(default_factory=Header)
    angle_min: float = 0.0
    angle_max: float = 0.0
    angle_increment: float = 0.0
    time_increment: float = 0.0
    scan_time: float = 0.0
    range_min: float = 0.0
    range_max: float = 0.0
    ranges: list[float] = field(default_factory=list)
    intensities: list[float] = field(default_factory=list)

    def angles(self) -> list[float]:
        """Beam angle of every entry in ``ranges``."""
        return [
            self.angle_min + i * self.angle_increment
            for i in range(len(self.ranges))
        ]


@dataclass
class Pose:
    """Position and orientation quaternion (x, y, z, w)."""

    position: tuple[float, float, float] = (0.0, 0.0, 0.0)
    orientation: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)


@dataclass
class PoseStamped:
    """A pose with the header of the data it was derived from."""

    header: Header = field(default_factory=Header)
    pose: Pose = field(default_factory=Pose)


@dataclass
class Marker:
    """A visualisation marker."""

    CUBE: ClassVar[int] = 1
    ADD: ClassVar[int] = 0

    header: Header = field(default_factory=Header)
    ns: str = ""
    id: int = 0
    type: int = 0
    action: int = 0
    pose: Pose = field(default_factory=Pose)
    scale: tuple[float, float, float] = (0.0, 0.0, 0.0)
    color: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    lifetime: float = 0.0