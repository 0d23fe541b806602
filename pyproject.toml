[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeonrun"
version = "0.1.0"
description = "A small tile-based dungeon puzzle: collect every coin, then reach the exit."
requires-python = ">=3.10"
keywords = ["game", "puzzle", "dungeon", "tile-map", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
dungeonrun = "dungeonrun.cli:main"
dungeonrun-bonus = "dungeonrun.cli:main_bonus"

[tool.hatch.build.targets.wheel]
packages = ["dungeonrun"]

[tool.pytest.ini_options]
addopts = "-ra"
