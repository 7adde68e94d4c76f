"""Row-major elevation grid and descent adjacency."""

from __future__ import annotations

from typing import Sequence

import numpy as np


class ElevationGrid:
    """Immutable rectangular elevation map stored as a flat row-major array.

    Cell ``index`` lives at ``row * columns + column``. An implicit directed
    edge runs from a cell to every axis-adjacent cell that is strictly lower.
    """

    def __init__(self, rows: int, columns: int, elevation: Sequence[int] | np.ndarray) -> None:
        rows = int(rows)
        columns = int(columns)
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid dimensions must be positive, got {columns}x{rows}")

        data = np.array(elevation, dtype=np.int64).ravel()
        if data.shape[0] != rows * columns:
            raise ValueError(
                f"expected {rows * columns} elevation values for a {columns}x{rows} grid, got {data.shape[0]}"
            )
        data.flags.writeable = False

        self.rows = rows
        self.columns = columns
        self.elevation = data

    @classmethod
    def from_array(cls, heights: np.ndarray) -> "ElevationGrid":
        """Build a grid from a 2D ``(rows, columns)`` array."""

        heights = np.asarray(heights)
        if heights.ndim != 2:
            raise ValueError("heights must be a 2D array")
        rows, columns = heights.shape
        return cls(rows, columns, heights)

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def index(self, row: int, column: int) -> int:
        return row * self.columns + column

    def position(self, index: int) -> tuple[int, int]:
        return divmod(index, self.columns)

    def as_array(self) -> np.ndarray:
        return self.elevation.reshape(self.rows, self.columns)

    def lower_neighbors(self, index: int) -> list[int]:
        """Return adjacent indices strictly lower than ``index``.

        Order is left, right, top, bottom; directions falling off the map are
        skipped. A local minimum yields an empty list.
        """

        columns = self.columns
        data = self.elevation
        row, column = divmod(index, columns)
        height = data[index]
        result: list[int] = []

        if column > 0 and data[index - 1] < height:
            result.append(index - 1)
        if column < columns - 1 and data[index + 1] < height:
            result.append(index + 1)
        if row > 0 and data[index - columns] < height:
            result.append(index - columns)
        if row < self.rows - 1 and data[index + columns] < height:
            result.append(index + columns)
        return result

    def __repr__(self) -> str:
        return f"ElevationGrid(rows={self.rows}, columns={self.columns})"
