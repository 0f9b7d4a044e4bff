[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubescan"
version = "0.1.0"
description = "Detect a cube face in 2D laser scans and describe looping obstacle animations"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "lidar",
    "laser scan",
    "clustering",
    "pca",
    "pose estimation",
    "robotics",
    "keyframe animation",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Recognition",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
cubescan = "cubescan.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubescan"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
