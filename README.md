# cubescan

Find a cube in a 2D laser scan and estimate where it is and how it is
turned; also describe a set of looping obstacle trajectories.

A scan is limited to a forward field of view, its valid returns are turned
into Cartesian points, neighbouring points are grouped into clusters, and the
cluster whose centroid is closest to the sensor is checked against the
expected cube size and for lying close to a straight line (one face of the
cube seen head-on). When the check passes, the centroid gives the position and
the cluster's principal axis gives the yaw, optionally smoothed over
successive scans. The result holds a pose, a visualisation marker and a copy
of the scan that keeps only the returns belonging to the cube.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
cubescan scan1.json [scan2.json ...]
```

Each file holds one scan as a JSON object. `ranges` is required; `null`
entries count as infinite (no return). Optional keys are `intensities`,
`angle_min`, `angle_max`, `angle_increment`, `time_increment`, `scan_time`,
`range_min`, `range_max` and `header` (an object with `stamp` and
`frame_id`). Missing numbers default to 0. For example:

```json
{
  "header": {"stamp": 0.0, "frame_id": "laser"},
  "angle_min": -0.785,
  "angle_increment": 0.01,
  "range_min": 0.1,
  "range_max": 10.0,
  "ranges": [2.0, 2.0, null, 2.01]
}
```

Files are processed in order by one detector, so angle smoothing carries
over from one file to the next. For each file one line is printed:

```
scan1.json: cube at (2.00, 0.05) rotation 89.7 deg
scan2.json: no cube
```

If a file cannot be read or is not a valid scan, an error is printed to
standard error and the command exits with status 1.

Options:

| option                      | meaning                                          |
|-----------------------------|--------------------------------------------------|
| `--simple`                  | use the bounding-box detector                    |
| `--cube-size M`             | expected cube edge length                        |
| `--size-tolerance F`        | allowed span deviation as a fraction             |
| `--line-thickness-factor F` | linearity limit as a multiple of the threshold   |
| `--fov-angle DEG`           | field of view in degrees                         |
| `--cluster-threshold M`     | maximum neighbour distance within a cluster      |
| `--min-points N`            | minimum points per cluster                       |
| `--no-smoothing`            | turn angle smoothing off                         |
| `--smoothing-factor F`      | smoothing factor, 0 (none) to 1 (frozen)         |
| `-v`, `--verbose`           | log debug messages                               |

`--size-tolerance`, `--line-thickness-factor`, `--no-smoothing` and
`--smoothing-factor` apply only to the default detector. Options not given
keep the detector's defaults.

## Library

### Detection

```python
from cubescan.detector import CubeDetector, DetectorConfig
from cubescan.messages import LaserScan

detector = CubeDetector(DetectorConfig(cube_size=1.0))
result = detector.process(scan)          # scan is a LaserScan
if result.detected:
    print(result.centroid, result.angle)
    pose, marker = result.pose, result.marker
filtered = result.filtered_scan          # always present
```

`process` returns a `DetectionResult` with `filtered_scan`, and, when a cube
is found, `pose`, `marker`, `centroid` and `angle`. `CubeDetector` keeps the
last accepted angle between calls; any scan without a detection clears it,
and `reset()` clears it by hand. The stages are also plain functions in
`cubescan.detector`: `extract_points`, `cluster_points`, `closest_cluster`,
`check_shape`, `principal_angle`, `filtered_scan` and `angle_difference`.
Points are `PointInfo(index, x, y)`, where `index` is the beam's position in
the scan.

`DetectorConfig` defaults:

| field                     | default |
|---------------------------|---------|
| `cube_size` (m)           | 1.0     |
| `size_tolerance`          | 0.2     |
| `line_thickness_factor`   | 5.0     |
| `fov_angle` (degrees)     | 90.0    |
| `cluster_threshold` (m)   | 0.05    |
| `min_points_per_cluster`  | 10      |
| `enable_angle_smoothing`  | True    |
| `angle_smoothing_factor`  | 0.5     |

### Simple detection

`cubescan.simple_detector.SimpleCubeDetector` picks the cluster whose
bounding-box perimeter is closest to that of the expected cube and estimates
its pose by PCA, with no shape check and no smoothing. `process` returns a
`SimpleDetection` (`pose`, `marker`, `centroid`, `angle`) or `None`. Its
marker sits at half the cube's height. `SimpleDetectorConfig` defaults:
`cube_size` 0.3, `fov_angle` 90.0, `cluster_threshold` 0.1,
`min_points_per_cluster` 5.

### Messages

`cubescan.messages` defines `Header`, `LaserScan` (with `angles()` giving
the beam angle of every range), `Pose`, `PoseStamped` and `Marker`.
`yaw_quaternion(angle)` gives the `(x, y, z, w)` quaternion of a rotation
about the vertical axis.

### Obstacle animations

```python
from cubescan.obstacles import animation, animation_names

for name in animation_names():           # "obstacle1" ... "obstacle13", "obstacles"
    print(name, animation(name).pose_at(12.5))
```

A `PoseAnimation` has a `name`, a `length` in seconds, a `loop` flag and
timed `KeyFrame`s (translation and roll/pitch/yaw rotation). `pose_at(time)`
interpolates position linearly and orientation by slerp; a looping animation
wraps the time by its length, otherwise the time is clamped to it.
`animation()` raises `KeyError` for an unknown name. `spin_animation()` in
`cubescan.animation` is the obstacle that turns in place once every 40
seconds; `track_a`, `track_b` and `track_c` hold the paths of obstacles 1–5,
6–9 and 10–13.

## What it does not do

cubescan does not read from a live sensor or publish results over a
messaging system: scans come in as `LaserScan` objects or JSON files, and
results are returned or printed. The obstacle animations only describe poses
over time; nothing here moves models in a simulator.