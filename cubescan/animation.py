"""Looping key-frame pose animations for moving obstacles."""

from __future__ import annotations

import bisect
import math
from dataclasses import dataclass, field

from .messages import Pose

Vector3 = tuple[float, float, float]
Quaternion = tuple[float, float, float, float]

# Value of pi used by the spinning obstacle's key frames.
_SPIN_PI = 3.141592


def _euler_quaternion(roll: float, pitch: float, yaw: float) -> Quaternion:
    """(x, y, z, w) quaternion of roll, pitch and yaw applied in Z-Y-X order."""
    cr, sr = math.cos(roll / 2.0), math.sin(roll / 2.0)
    cp, sp = math.cos(pitch / 2.0), math.sin(pitch / 2.0)
    cy, sy = math.cos(yaw / 2.0), math.sin(yaw / 2.0)
    return (
        sr * cp * cy - cr * sp * sy,
        cr * sp * cy + sr * cp * sy,
        cr * cp * sy - sr * sp * cy,
        cr * cp * cy + sr * sp * sy,
    )


def _slerp(q1: Quaternion, q2: Quaternion, t: float) -> Quaternion:
    """Spherical interpolation along the shortest path."""
    dot = sum(a * b for a, b in zip(q1, q2))
    if dot < 0.0:
        q2 = tuple(-c for c in q2)
        dot = -dot
    if dot > 0.9995:
        blended = [a + t * (b - a) for a, b in zip(q1, q2)]
        norm = math.sqrt(sum(c * c for c in blended))
        return tuple(c / norm for c in blended)
    theta = math.acos(min(dot, 1.0))
    sin_theta = math.sin(theta)
    w1 = math.sin((1.0 - t) * theta) / sin_theta
    w2 = math.sin(t * theta) / sin_theta
    return tuple(w1 * a + w2 * b for a, b in zip(q1, q2))


@dataclass(frozen=True)
class KeyFrame:
    """A pose at a point in time: translation and (roll, pitch, yaw) rotation."""

    time: float
    translation: Vector3 = (0.0, 0.0, 0.0)
    rotation: Vector3 = (0.0, 0.0, 0.0)

    @property
    def orientation(self) -> Quaternion:
        return _euler_quaternion(*self.rotation)


@dataclass(frozen=True)
class PoseAnimation:
    """A named animation of a given length, optionally repeating."""

    name: str
    length: float
    loop: bool = True
    keyframes: tuple[KeyFrame, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.length <= 0.0:
            raise ValueError(f"animation length must be positive, got {self.length}")
        ordered = tuple(sorted(self.keyframes, key=lambda frame: frame.time))
        object.__setattr__(self, "keyframes", ordered)

    def _local_time(self, time: float) -> float:
        if self.loop:
            return time % self.length
        return min(max(time, 0.0), self.length)

    def pose_at(self, time: float) -> Pose:
        """Interpolated pose at ``time`` seconds after the animation started."""
        if not self.keyframes:
            raise ValueError(f"animation {self.name!r} has no key frames")
        t = self._local_time(time)
        times = [frame.time for frame in self.keyframes]
        after = bisect.bisect_right(times, t)
        if after == 0:
            frame = self.keyframes[0]
            return Pose(position=frame.translation, orientation=frame.orientation)
        if after == len(self.keyframes):
            frame = self.keyframes[-1]
            return Pose(position=frame.translation, orientation=frame.orientation)

        start, end = self.keyframes[after - 1], self.keyframes[after]
        span = end.time - start.time
        fraction = (t - start.time) / span if span > 0.0 else 0.0
        position = tuple(
            a + fraction * (b - a) for a, b in zip(start.translation, end.translation)
        )
        orientation = _slerp(start.orientation, end.orientation, fraction)
        return Pose(position=position, orientation=orientation)


def spin_animation() -> PoseAnimation:
    """An obstacle turning in place one full revolution every 40 seconds."""
    return PoseAnimation(
        name="move",
        length=40.0,
        loop=True,
        keyframes=(
            KeyFrame(0.0, (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
            KeyFrame(20.0, (0.0, 0.0, 0.0), (0.0, 0.0, _SPIN_PI)),
            KeyFrame(40.0, (0.0, 0.0, 0.0), (0.0, 0.0, 2 * _SPIN_PI)),
        ),
    )