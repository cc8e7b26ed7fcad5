[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "drivekit"
version = "0.1.0"
description = "Drivetrain control, odometry, PID and touch-UI building blocks for competition robots, modelled in plain Python objects"
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "odometry", "pid", "drivetrain", "chassis", "competition"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Typing :: Typed",
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["drivekit"]

[tool.pytest.ini_options]
addopts = "-ra"
