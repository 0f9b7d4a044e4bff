"""Command line entry point: detect cubes in laser scans stored as JSON."""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path
from typing import Optional, Sequence

from .detector import CubeDetector, DetectorConfig
from .messages import Header, LaserScan
from .simple_detector import SimpleCubeDetector, SimpleDetectorConfig

_FLOAT_FIELDS = (
    "angle_min",
    "angle_max",
    "angle_increment",
    "time_increment",
    "scan_time",
    "range_min",
    "range_max",
)


def _float_list(values, name: str) -> list[float]:
    if not isinstance(values, list):
        raise ValueError(f"'{name}' must be a list")
    return [math.inf if v is None else float(v) for v in values]


def load_scan(path) -> LaserScan:
    """Read a scan from a JSON object; ``null`` ranges count as infinite."""
    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: a scan must be a JSON object")
    if "ranges" not in data:
        raise ValueError(f"{path}: scan has no 'ranges'")
    header_data = data.get("header") or {}
    if not isinstance(header_data, dict):
        raise ValueError(f"{path}: 'header' must be an object")
    header = Header(
        stamp=float(header_data.get("stamp", 0.0)),
        frame_id=str(header_data.get("frame_id", "")),
    )
    fields = {name: float(data[name]) for name in _FLOAT_FIELDS if name in data}
    return LaserScan(
        header=header,
        ranges=_float_list(data["ranges"], "ranges"),
        intensities=_float_list(data.get("intensities", []), "intensities"),
        **fields,
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cubescan", description="Detect a cube face in planar laser scans."
    )
    parser.add_argument("scans", nargs="+", help="JSON scan files, processed in order")
    parser.add_argument("--simple", action="store_true", help="use the bounding-box detector")
    parser.add_argument("--cube-size", type=float)
    parser.add_argument("--size-tolerance", type=float)
    parser.add_argument("--line-thickness-factor", type=float)
    parser.add_argument("--fov-angle", type=float)
    parser.add_argument("--cluster-threshold", type=float)
    parser.add_argument("--min-points", type=int)
    parser.add_argument("--no-smoothing", action="store_true")
    parser.add_argument("--smoothing-factor", type=float)
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def _given(**options) -> dict:
    return {key: value for key, value in options.items() if value is not None}


def _build_detector(args: argparse.Namespace):
    if args.simple:
        config = SimpleDetectorConfig(
            **_given(
                cube_size=args.cube_size,
                fov_angle=args.fov_angle,
                cluster_threshold=args.cluster_threshold,
                min_points_per_cluster=args.min_points,
            )
        )
        return SimpleCubeDetector(config)
    config = DetectorConfig(
        **_given(
            cube_size=args.cube_size,
            size_tolerance=args.size_tolerance,
            line_thickness_factor=args.line_thickness_factor,
            fov_angle=args.fov_angle,
            cluster_threshold=args.cluster_threshold,
            min_points_per_cluster=args.min_points,
            angle_smoothing_factor=args.smoothing_factor,
        )
    )
    if args.no_smoothing:
        config.enable_angle_smoothing = False
    return CubeDetector(config)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Process each scan file and print one result line per scan."""
    args = _parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    detector = _build_detector(args)

    for path in args.scans:
        try:
            scan = load_scan(Path(path))
        except (OSError, ValueError) as exc:
            print(f"cubescan: {exc}", file=sys.stderr)
            return 1
        result = detector.process(scan)
        if args.simple:
            found = result
        else:
            found = result if result.detected else None
        if found is None:
            print(f"{path}: no cube")
        else:
            x, y = found.centroid
            print(
                f"{path}: cube at ({x:.2f}, {y:.2f}) "
                f"rotation {math.degrees(found.angle):.1f} deg"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())