from __future__ import annotations

import numpy as np
import pytest

from skislope.grid import ElevationGrid


def _random_grid(seed: int, rows: int, columns: int, *, span: int = 6) -> ElevationGrid:
    rng = np.random.default_rng(seed)
    return ElevationGrid(rows, columns, rng.integers(-span, span, size=rows * columns))


def test_lower_neighbors_order_left_right_top_bottom() -> None:
    grid = ElevationGrid(3, 3, [0, 1, 0, 2, 9, 3, 0, 4, 0])

    assert grid.lower_neighbors(4) == [3, 5, 1, 7]


def test_lower_neighbors_skip_equal_and_higher_cells() -> None:
    grid = ElevationGrid(1, 3, [3, 3, 3])

    assert grid.lower_neighbors(0) == []
    assert grid.lower_neighbors(1) == []
    assert grid.lower_neighbors(2) == []


def test_lower_neighbors_respect_borders() -> None:
    # Corner and edge cells must not wrap onto the previous or next row.
    grid = ElevationGrid(2, 3, [5, 9, 1, 0, 9, 9])

    assert grid.lower_neighbors(2) == []
    assert grid.lower_neighbors(3) == []
    assert grid.lower_neighbors(0) == [3]
    assert grid.lower_neighbors(5) == [2]


def test_lower_neighbors_are_adjacent_and_strictly_lower() -> None:
    for seed in range(5):
        grid = _random_grid(seed, 7, 5)
        for index in range(grid.size):
            row, column = grid.position(index)
            for neighbor in grid.lower_neighbors(index):
                n_row, n_column = grid.position(neighbor)
                assert neighbor != index
                assert 0 <= neighbor < grid.size
                assert abs(n_row - row) + abs(n_column - column) == 1
                assert grid.elevation[neighbor] < grid.elevation[index]


def test_descent_graph_is_acyclic() -> None:
    for seed in range(5):
        grid = _random_grid(seed, 9, 8, span=4)
        color = [0] * grid.size  # 0 = new, 1 = on stack, 2 = done

        for root in range(grid.size):
            if color[root]:
                continue
            color[root] = 1
            stack = [(root, iter(grid.lower_neighbors(root)))]
            while stack:
                node, pending = stack[-1]
                for u in pending:
                    assert color[u] != 1, f"cycle through cell {u}"
                    if color[u] == 0:
                        color[u] = 1
                        stack.append((u, iter(grid.lower_neighbors(u))))
                        break
                else:
                    color[node] = 2
                    stack.pop()


def test_grid_is_immutable() -> None:
    grid = ElevationGrid(2, 2, [4, 3, 2, 1])

    with pytest.raises(ValueError):
        grid.elevation[0] = 7


def test_grid_rejects_inconsistent_shape() -> None:
    with pytest.raises(ValueError):
        ElevationGrid(2, 2, [1, 2, 3])
    with pytest.raises(ValueError):
        ElevationGrid(0, 3, [])


def test_from_array_keeps_row_major_layout() -> None:
    heights = np.array([[1, 2, 3], [4, 5, 6]])
    grid = ElevationGrid.from_array(heights)

    assert (grid.rows, grid.columns) == (2, 3)
    assert grid.index(1, 0) == 3
    assert grid.position(5) == (1, 2)
    assert np.array_equal(grid.as_array(), heights)
