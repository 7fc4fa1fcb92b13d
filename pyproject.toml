[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "robosim"
version = "1.0.0"
description = "A small robot simulation toolkit: sensors, reading buffers, a topic registry, a command queue and a spinning robot loop."
requires-python = ">=3.10"
dependencies = []
keywords = ["robotics", "simulation", "sensor", "topics", "message-queue"]
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
    "Topic :: Scientific/Engineering :: Human Machine Interfaces",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
robosim = "robosim.simulator:main"
robosim-sensor = "robosim.sensor:main"
robosim-math = "robosim.mathutils:main"

[tool.hatch.build.targets.wheel]
packages = ["robosim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
