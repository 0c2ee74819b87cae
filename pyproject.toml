[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aoc24"
version = "0.1.0"
description = "Solvers for a collection of daily programming puzzles: lists, trails, stones, gardens, claw machines, robots, warehouses, mazes and a tiny computer."
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "solver", "grid", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc24-day01 = "aoc24.day01:main"
aoc24-day10 = "aoc24.day10:main"
aoc24-day11 = "aoc24.day11:main"
aoc24-day12 = "aoc24.day12:main"
aoc24-day13 = "aoc24.day13:main"
aoc24-day14 = "aoc24.day14:main"
aoc24-day15 = "aoc24.day15:main"
aoc24-day16 = "aoc24.day16:main"
aoc24-day17 = "aoc24.day17:main"

[tool.hatch.build.targets.wheel]
packages = ["aoc24"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
