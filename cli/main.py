"""CLI entry point for the longest ski slope solver."""

from __future__ import annotations

import argparse
import sys
import time

from skislope.config import MapConfig, SolverConfig
from skislope.io import MapFormatError, load_map
from skislope.metrics import slope_metrics
from skislope.solver import LongestSlopeSolver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skislope",
        description="Find the longest and steepest descending ski slope on an elevation map",
    )
    parser.add_argument("map", nargs="?", help="Path to a map file: '<columns> <rows>' then row-major elevations")
    parser.add_argument(
        "--strict",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Reject values beyond columns*rows instead of ignoring them",
    )
    parser.add_argument("--verbose", action="store_true", help="Write map statistics and the best path to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.map is None:
        parser.print_usage(sys.stderr)
        print("skislope: error: a map file is required", file=sys.stderr)
        return 1

    config = SolverConfig(verbose=args.verbose, map=MapConfig(strict=args.strict))

    try:
        grid = load_map(args.map, config=config.map)
    except MapFormatError as exc:
        print(f"Invalid map {args.map}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Can't open {args.map}: {exc.strerror or exc}", file=sys.stderr)
        return 1

    solve_start = time.perf_counter()
    solver = LongestSlopeSolver(grid)
    result = solver.solve()
    solve_seconds = time.perf_counter() - solve_start

    print(format_result(result.length, result.drop))

    if config.verbose:
        _print_diagnostics(solver, result.start, solve_seconds)
    return 0


def format_result(length: int, drop: int) -> str:
    return f"Length: {length}\nDrop: {drop}"


def _print_diagnostics(solver: LongestSlopeSolver, start: int, solve_seconds: float) -> None:
    grid = solver.grid
    metrics = slope_metrics(grid)
    print(f"Map: {grid.columns}x{grid.rows} ({metrics.cells} cells)", file=sys.stderr)
    print(
        "Descent graph: "
        f"edges={metrics.edges}, "
        f"local_minima={metrics.local_minima}, "
        f"summits={metrics.summits}, "
        f"relief={metrics.relief} ({metrics.min_elevation}..{metrics.max_elevation})",
        file=sys.stderr,
    )
    path = solver.trace(start)
    row, column = grid.position(start)
    route = " -> ".join(str(grid.elevation[i]) for i in path)
    print(f"Best slope from row {row}, column {column}: {route}", file=sys.stderr)
    print(f"Solve time: {solve_seconds:.3f} s", file=sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
