"""Solvers for Advent of Code puzzles from 2023, 2024 and 2025."""

__version__ = "0.1.0"