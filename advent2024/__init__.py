"""Advent of Code 2024 puzzle solutions for days 1 to 21, and their runner."""

__version__ = "0.1.0"