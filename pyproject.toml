[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "advent2024"
version = "0.1.0"
description = "Solutions to days 1 to 21 of the 2024 Advent of Code puzzles, with a small runner for timing and submitting answers."
requires-python = ">=3.10"
dependencies = []
keywords = ["advent-of-code", "puzzles", "aoc", "2024"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
advent2024-day01 = "advent2024.solutions.day01:main"
advent2024-day02 = "advent2024.solutions.day02:main"
advent2024-day03 = "advent2024.solutions.day03:main"
advent2024-day04 = "advent2024.solutions.day04:main"
advent2024-day05 = "advent2024.solutions.day05:main"
advent2024-day06 = "advent2024.solutions.day06:main"
advent2024-day07 = "advent2024.solutions.day07:main"
advent2024-day08 = "advent2024.solutions.day08:main"
advent2024-day09 = "advent2024.solutions.day09:main"
advent2024-day10 = "advent2024.solutions.day10:main"
advent2024-day11 = "advent2024.solutions.day11:main"
advent2024-day12 = "advent2024.solutions.day12:main"
advent2024-day13 = "advent2024.solutions.day13:main"
advent2024-day14 = "advent2024.solutions.day14:main"
advent2024-day15 = "advent2024.solutions.day15:main"
advent2024-day16 = "advent2024.solutions.day16:main"
advent2024-day17 = "advent2024.solutions.day17:main"
advent2024-day18 = "advent2024.solutions.day18:main"
advent2024-day19 = "advent2024.solutions.day19:main"
advent2024-day20 = "advent2024.solutions.day20:main"
advent2024-day21 = "advent2024.solutions.day21:main"

[tool.hatch.build.targets.wheel]
packages = ["advent2024"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
