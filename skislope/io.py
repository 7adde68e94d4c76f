"""Map file parsing."""

from __future__ import annotations

from pathlib import Path
import re

import numpy as np

from skislope.config import MapConfig
from skislope.grid import ElevationGrid

_INTEGER_RE = re.compile(r"-?[0-9]+")
_MAX_RELIEF = int(np.iinfo(np.int64).max)


class MapFormatError(ValueError):
    """Raised when map text does not describe a usable grid."""


def parse_map(text: str, *, config: MapConfig | None = None) -> ElevationGrid:
    """Parse ``<columns> <rows>`` followed by row-major elevations.

    Values may be laid out with any whitespace. In strict mode extra values
    after the last cell are rejected; otherwise they are ignored.
    """

    config = config or MapConfig()
    tokens = text.split()
    if len(tokens) < 2:
        raise MapFormatError("missing '<columns> <rows>' header")

    for token in tokens:
        if not _INTEGER_RE.fullmatch(token):
            raise MapFormatError(f"non-integer value in map: {token!r}")

    try:
        values = np.array([int(token) for token in tokens], dtype=np.int64)
    except OverflowError as exc:
        raise MapFormatError(f"elevation out of range: {exc}") from exc

    columns, rows = int(values[0]), int(values[1])
    if columns <= 0 or rows <= 0:
        raise MapFormatError(f"map is empty ({columns}x{rows})")

    expected = rows * columns
    body = values[2:]
    if body.shape[0] < expected:
        raise MapFormatError(f"expected {expected} elevation values, found {body.shape[0]}")
    if config.strict and body.shape[0] > expected:
        raise MapFormatError(f"expected {expected} elevation values, found {body.shape[0]}")
    body = body[:expected]

    # Drops are kept as int64; no path drops more than the relief.
    relief = int(body.max()) - int(body.min())
    if relief > _MAX_RELIEF:
        raise MapFormatError(f"elevation range {relief} does not fit in 64 bits")

    return ElevationGrid(rows, columns, body)


def load_map(path: str | Path, *, config: MapConfig | None = None) -> ElevationGrid:
    """Read and parse a map file. ``OSError`` propagates to the caller."""

    text = Path(path).read_text(encoding="ascii", errors="replace")
    return parse_map(text, config=config)
