"""Lookup of every moving obstacle's animation by obstacle name."""

from __future__ import annotations

from . import track_a, track_b, track_c
from .animation import PoseAnimation, spin_animation


def _registry() -> dict[str, PoseAnimation]:
    tracks = [*track_a.animations(), *track_b.animations(), *track_c.animations()]
    registry = {f"obstacle{i}": anim for i, anim in enumerate(tracks, start=1)}
    registry["obstacles"] = spin_animation()
    return registry


def animation_names() -> list[str]:
    """Names of all obstacles with an animation, in order."""
    return list(_registry())


def animation(name: str) -> PoseAnimation:
    """The animation of the obstacle called ``name``."""
    registry = _registry()
    try:
        return registry[name]
    except KeyError:
        raise KeyError(f"unknown obstacle {name!r}") from None