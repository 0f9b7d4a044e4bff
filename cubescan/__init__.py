"""Cube detection in 2D laser scans, with looping obstacle animations."""

__version__ = "0.1.0"