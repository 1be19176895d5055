[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "visionline"
version = "0.1.0"
description = "3D line detection with a Hough transform, point cloud utilities, and frame parsing and writing for Visionary 3D cameras"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "point cloud",
    "hough transform",
    "line detection",
    "3d",
    "time of flight",
    "stereo camera",
    "pam",
    "png",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["visionline"]

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
