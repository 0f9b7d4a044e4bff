"""Paths of moving obstacles 10 to 13."""

from __future__ import annotations

from typing import Sequence

from .animation import KeyFrame, PoseAnimation


def _path(
    name: str, length: float, waypoints: Sequence[tuple[float, float, float]]
) -> PoseAnimation:
    """A looping, non-rotating animation through (time, x, y) waypoints."""
    return PoseAnimation(
        name=name,
        length=length,
        loop=True,
        keyframes=tuple(KeyFrame(t, (x, y, 0.0)) for t, x, y in waypoints),
    )


def animations() -> list[PoseAnimation]:
    """Animations of obstacles 10 to 13, in order."""
    return [
        _path(
            "move10",
            140.0,
            [
                (0, 0.0, 0.0),
                (10, 0.0, -0.5),
                (35, 3.0, -0.8),
                (40, 3.5, -1.3),
                (60, 4.0, 0.0),
                (80, 3.5, -2.0),
                (110, 2.0, -2.0),
                (120, 1.3, -1.1),
                (130, 0.0, -1.1),
                (140, 0.0, 0.0),
            ],
        ),
        _path(
            "move11",
            110.0,
            [
                (0, 0.0, 0.0),
                (20, 1.0, 2.5),
                (35, -1.0, 2.0),
                (55, 0.0, 0.0),
                (65, 1.0, 0.0),
                (75, 2.0, 1.0),
                (85, 1.0, 2.0),
                (95, 0.0, 2.0),
                (110, 0.0, 0.0),
            ],
        ),
        _path(
            "move12",
            120.0,
            [
                (0, 0.0, 0.0),
                (15, 1.0, -1.0),
                (40, 1.5, -4.0),
                (50, 1.0, -4.0),
                (80, -1.5, -2.8),
                (100, -1.5, -0.8),
                (110, -1.0, -0.7),
                (120, 0.0, 0.0),
            ],
        ),
        # The thirteenth obstacle reuses the twelfth's animation name.
        _path(
            "move12",
            345.0,
            [
                (0, 0.0, 0.0),
                (15, 0.0, -1.0),
                (30, -1.0, -1.0),
                (300, -2.0, -1.0),
            ],
        ),
    ]