"""Whole-grid descent graph statistics."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
from scipy.ndimage import maximum_filter, minimum_filter

from skislope.grid import ElevationGrid

_CROSS = np.array(
    [
        [0, 1, 0],
        [1, 1, 1],
        [0, 1, 0],
    ],
    dtype=bool,
)


@dataclass(frozen=True)
class SlopeMetrics:
    """Shape summary of the descent DAG implied by a grid."""

    cells: int
    edges: int
    local_minima: int
    summits: int
    min_elevation: int
    max_elevation: int
    relief: int


def slope_metrics(grid: ElevationGrid) -> SlopeMetrics:
    """Count edges, leaves and sources of the descent graph."""

    heights = grid.as_array()

    # Every unequal adjacent pair yields exactly one downhill edge.
    edges = int(np.count_nonzero(heights[:, 1:] != heights[:, :-1]))
    edges += int(np.count_nonzero(heights[1:, :] != heights[:-1, :]))

    # "nearest" pads with the cell itself, so borders never add a lower/higher neighbor.
    lowest = minimum_filter(heights, footprint=_CROSS, mode="nearest")
    highest = maximum_filter(heights, footprint=_CROSS, mode="nearest")

    min_elevation = int(heights.min())
    max_elevation = int(heights.max())
    return SlopeMetrics(
        cells=grid.size,
        edges=edges,
        local_minima=int(np.count_nonzero(lowest == heights)),
        summits=int(np.count_nonzero(highest == heights)),
        min_elevation=min_elevation,
        max_elevation=max_elevation,
        relief=max_elevation - min_elevation,
    )
