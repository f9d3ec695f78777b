[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolver"
version = "0.1.0"
description = "Solvers for Advent of Code puzzles from 2023, 2024 and 2025"
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "solver", "algorithms"]
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

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent-2023-day01 = "adventsolver.y2023_day01:main"
advent-2023-day02 = "adventsolver.y2023_day02:main"
advent-2024-day01 = "adventsolver.y2024_day01:main"
advent-2024-day02 = "adventsolver.y2024_day02:main"
advent-2024-day03 = "adventsolver.y2024_day03:main"
advent-2024-day04 = "adventsolver.y2024_day04:main"
advent-2024-day05 = "adventsolver.y2024_day05:main"
advent-2024-day06 = "adventsolver.y2024_day06:main"
advent-2024-day07 = "adventsolver.y2024_day07:main"
advent-2024-day08 = "adventsolver.y2024_day08:main"
advent-2024-day09 = "adventsolver.y2024_day09:main"
advent-2024-day10 = "adventsolver.y2024_day10:main"
advent-2024-day11 = "adventsolver.y2024_day11:main"
advent-2024-day12 = "adventsolver.y2024_day12:main"
advent-2025-day01 = "adventsolver.y2025_day01:main"
advent-2025-day02 = "adventsolver.y2025_day02:main"
advent-2025-day03 = "adventsolver.y2025_day03:main"
advent-2025-day04 = "adventsolver.y2025_day04:main"
advent-2025-day05 = "adventsolver.y2025_day05:main"
advent-2025-day06 = "adventsolver.y2025_day06:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolver"]

[tool.pytest.ini_options]
addopts = "-ra"
