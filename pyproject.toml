[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cozy2d"
version = "0.1.0"
description = "Building blocks for small 2D games: vectors, queued mesh and text drawing, timers, tweens, a seeded RNG and a spatial hash."
requires-python = ">=3.10"
keywords = ["gamedev", "2d", "timer", "tween", "spatial-hash", "mesh", "random"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cozy2d"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
