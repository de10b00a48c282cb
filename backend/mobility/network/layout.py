"""Road layout helpers used by the city plan."""

from mobility.core.config import AUTO_GRID_SPACING
from mobility.core.state import Cell


def manhattan_path(a, b) -> list[Cell]:
    """L-shaped path from ``a`` to ``b``: rows first along a's column, then columns along b's row.

    The corner cell appears twice; callers mark cells idempotently.
    """
    path: list[Cell] = []
    dr = 1 if a[0] <= b[0] else -1
    for r in range(a[0], b[0] + dr, dr):
        path.append(Cell(r, a[1]))
    dc = 1 if a[1] <= b[1] else -1
    for c in range(a[1], b[1] + dc, dc):
        path.append(Cell(b[0], c))
    return path


def lattice_roads(rows: int, cols: int, spacing: int = AUTO_GRID_SPACING) -> set[Cell]:
    """Every cell on a row or column whose index is a multiple of ``spacing``."""
    if spacing < 1:
        raise ValueError(f"spacing must be >= 1, got {spacing}")
    roads: set[Cell] = set()
    for r in range(0, rows, spacing):
        roads.update(Cell(r, c) for c in range(cols))
    for c in range(0, cols, spacing):
        roads.update(Cell(r, c) for r in range(rows))
    return roads
