"""Configuration models for map loading and solving."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MapConfig:
    """Controls how strictly map files are parsed."""

    strict: bool = True


@dataclass(frozen=True)
class SolverConfig:
    """Primary run configuration."""

    verbose: bool = False
    map: MapConfig = field(default_factory=MapConfig)
