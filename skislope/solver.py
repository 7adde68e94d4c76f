"""Longest descending path search over an elevation grid."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from skislope.grid import ElevationGrid


@dataclass(frozen=True)
class NodeState:
    """Snapshot of one cell's memoized search state."""

    visited: bool
    distance: int
    drop: int


@dataclass(frozen=True)
class SlopeResult:
    """Global best slope: edge count, its largest drop, and where it starts."""

    distance: int
    drop: int
    start: int

    @property
    def length(self) -> int:
        return self.distance + 1


class LongestSlopeSolver:
    """Memoized depth-first search over the grid's descent DAG.

    For every cell the solver records ``distance`` (edges on the longest
    descending path starting there) and ``drop`` (largest elevation loss among
    paths of that length). Cells are settled in reverse topological order: a
    cell is finalized only once all of its lower neighbors are.

    The traversal keeps its own frame stack, so path length is not limited by
    the interpreter's recursion depth.
    """

    def __init__(self, grid: ElevationGrid) -> None:
        self.grid = grid
        self._heights = grid.elevation.tolist()
        self.visited = np.zeros(grid.size, dtype=bool)
        self.distance = np.zeros(grid.size, dtype=np.int64)
        self.drop = np.zeros(grid.size, dtype=np.int64)

    def state(self, index: int) -> NodeState:
        return NodeState(bool(self.visited[index]), int(self.distance[index]), int(self.drop[index]))

    def visit(self, start: int) -> None:
        """Compute and memoize the state of ``start`` and everything below it."""

        if self.visited[start]:
            return

        lower_neighbors = self.grid.lower_neighbors
        visited = self.visited
        first = lower_neighbors(start)
        frames = [(start, first, iter(first))]

        while frames:
            node, neighbors, pending = frames[-1]
            for u in pending:
                if not visited[u]:
                    below = lower_neighbors(u)
                    frames.append((u, below, iter(below)))
                    break
            else:
                frames.pop()
                self._settle(node, neighbors)

    def _settle(self, v: int, neighbors: list[int]) -> None:
        heights = self._heights
        best_distance = 0
        best_drop = 0
        for u in neighbors:
            distance = int(self.distance[u]) + 1
            drop = int(self.drop[u]) + heights[v] - heights[u]
            # A longer path invalidates the drop recorded for a shorter one.
            if distance > best_distance:
                best_distance = distance
                best_drop = drop
            elif distance == best_distance:
                best_drop = max(best_drop, drop)

        self.distance[v] = best_distance
        self.drop[v] = best_drop
        self.visited[v] = True

    def solve(self) -> SlopeResult:
        """Visit every cell in index order and fold in the global maximum."""

        max_distance = 0
        max_drop = 0
        best_start = 0

        for v in range(self.grid.size):
            if not self.visited[v]:
                self.visit(v)
            distance = int(self.distance[v])
            drop = int(self.drop[v])
            if distance > max_distance:
                max_distance = distance
                max_drop = drop
                best_start = v
            elif distance == max_distance and drop > max_drop:
                max_drop = drop
                best_start = v

        return SlopeResult(distance=max_distance, drop=max_drop, start=best_start)

    def trace(self, start: int) -> list[int]:
        """Return the cells of one path realizing the state of ``start``."""

        if not self.visited[start]:
            raise ValueError(f"cell {start} has not been visited")

        heights = self._heights
        path = [start]
        v = start
        while self.distance[v] > 0:
            for u in self.grid.lower_neighbors(v):
                if (
                    self.distance[u] + 1 == self.distance[v]
                    and int(self.drop[u]) + heights[v] - heights[u] == self.drop[v]
                ):
                    path.append(u)
                    v = u
                    break
            else:
                raise RuntimeError(f"no successor of cell {v} matches its recorded state")
        return path


def solve(grid: ElevationGrid) -> SlopeResult:
    """Solve ``grid`` with a fresh solver."""

    return LongestSlopeSolver(grid).solve()
