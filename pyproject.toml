[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "safety_island"
version = "0.1.0"
description = "Building blocks for vehicle longitudinal control on a safety island: PID controller, smooth stop, low-pass filter, rate limiting, trajectory pitch and message types"
requires-python = ">=3.10"
dependencies = []
keywords = ["autonomous-driving", "safety", "pid", "longitudinal-control", "smooth-stop"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["safety_island"]

[tool.pytest.ini_options]
addopts = "-ra"
