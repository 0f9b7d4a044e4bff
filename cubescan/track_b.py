"""Paths of moving obstacles 6 to 9."""

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
    """Animations of obstacles 6 to 9, in order."""
    return [
        _path(
            "move6",
            170.0,
            [
                (0, 0.0, 0.0),
                (10, -1.0, 0.0),
                (40, -1.0, 2.0),
                (55, -1.5, 0.0),
                (85, 0.0, 2.0),
                (120, -4.0, -1.8),
                (130, -3.0, -1.8),
                (145, -2.5, 1.0),
                (170, 0.0, 0.0),
            ],
        ),
        _path(
            "move7",
            195.0,
            [
                (0, 0.0, 0.0),
                (15, -0.5, -0.5),
                (25, -1.5, -0.3),
                (55, -4.5, 0.5),
                (85, -4.0, -2.7),
                (135, 0.0, -4.5),
                (175, -1.0, -1.0),
                (195, 0.0, 0.0),
            ],
        ),
        _path(
            "move8",
            150.0,
            [
                (0, 0.0, 0.0),
                (10, 1.0, 1.0),
                (30, 3.0, 0.0),
                (40, 4.0, 1.0),
                (70, 2.5, 4.2),
                (100, -0.5, 4.2),
                (130, -0.5, 1.0),
                (140, 0.5, 0.5),
                (150, 0.0, 0.0),
            ],
        ),
        _path(
            "move9",
            120.0,
            [
                (0, 0.0, 0.0),
                (20, -2.0, 0.0),
                (40, -3.5, 1.5),
                (55, -3.5, 3.3),
                (90, -0.6, 3.3),
                (105, -0.6, 2.0),
                (110, 0.0, 2.0),
                (120, 0.0, 0.0),
            ],
        ),
    ]