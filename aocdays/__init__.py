"""Advent of Code 2022 and 2023 puzzle solutions and a 2022 input-fetching helper."""

__version__ = "0.1.0"