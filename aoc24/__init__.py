"""Advent of Code 2024 puzzle solutions, one module per solved day."""

__version__ = "0.1.0"