"""Paths of the first five moving obstacles."""

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
    """Animations of obstacles 1 to 5, in order."""
    return [
        _path(
            "move1",
            160.0,
            [
                (0, 0.0, 0.0),
                (10, -0.5, -1.0),
                (50, -3.5, -1.0),
                (70, -3.7, -3.0),
                (90, -3.5, -1.0),
                (130, -0.5, -1.0),
                (140, 0.0, 0.0),
                (160, 0.0, 0.0),
            ],
        ),
        _path(
            "move2",
            140.0,
            [
                (0, 0.0, 0.0),
                (10, 0.7, 0.2),
                (40, 2.5, 3.5),
                (55, 0.3, 3.5),
                (85, 3.5, 1.8),
                (100, 3.5, 0.0),
                (110, 2.0, 0.5),
                (115, 1.5, 1.0),
                (120, 1.0, 0.5),
                (125, 0.5, 0.1),
                (130, 0.0, 0.0),
                (140, 0.0, 0.0),
            ],
        ),
        _path(
            "move3",
            165.0,
            [
                (0, 0.0, 0.0),
                (10, -1.0, 0.2),
                (40, -2.0, 1.0),
                (55, -3.5, 0.0),
                (85, -2.5, 1.5),
                (110, 0.0, 0.0),
                (130, -1.0, 2.0),
                (145, -2.0, 1.0),
                (165, 0.0, 0.0),
            ],
        ),
        _path(
            "move4",
            170.0,
            [
                (0, 0.0, 0.0),
                (10, 0.0, -3.2),
                (30, 2.0, -2.7),
                (40, 0.0, 0.0),
                (60, 0.0, -3.2),
                (80, 2.0, -2.7),
                (110, 0.0, 0.0),
                (130, 0.0, -3.2),
                (150, 2.0, -2.7),
                (170, 0.0, 0.0),
            ],
        ),
        _path(
            "move5",
            205.0,
            [
                (0, 0.0, 0.0),
                (10, 0.7, 1.0),
                (40, 2.5, 2.0),
                (55, 0.0, 2.0),
                (85, 0.0, -1.0),
                (110, 2.0, 0.0),
                (125, 4.0, 0.0),
                (145, 3.0, -2.0),
                (170, 2.0, 0.0),
                (185, 2.0, 2.0),
                (205, 0.0, 0.0),
            ],
        ),
    ]