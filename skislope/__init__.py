"""Longest ski slope solver package."""

from .config import MapConfig, SolverConfig
from .grid import ElevationGrid
from .solver import LongestSlopeSolver, SlopeResult, solve

__all__ = ["MapConfig", "SolverConfig", "ElevationGrid", "LongestSlopeSolver", "SlopeResult", "solve"]
