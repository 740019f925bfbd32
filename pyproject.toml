[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "phoenixbot"
version = "0.1.0"
description = "Drivetrain motion control, odometry and match routines for a competition robot, with simulated devices"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "robotics",
    "pid",
    "odometry",
    "drivetrain",
    "motion-control",
    "autonomous",
    "boomerang",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Embedded Systems",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["phoenixbot"]

[tool.hatch.build.targets.sdist]
include = ["phoenixbot", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"
