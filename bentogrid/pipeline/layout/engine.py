"""Main layout engine — single-pass greedy scan over an occupancy grid."""

from __future__ import annotations

import logging

from bentogrid.pipeline.config import LAYOUT_RULES, LayoutRules

from .grid import OccupancyGrid
from .models import Cell


log = logging.getLogger("bentogrid.layout")


def span_value(pattern_seed: int, cell_index: int, rules: LayoutRules = LAYOUT_RULES) -> int:
    """Pseudo-random value deciding the span of the ``cell_index``-th cell.

    Depends only on the seed and the placement count, never on grid
    coordinates.
    """
    return (pattern_seed + cell_index * rules.index_multiplier) % rules.rand_modulus


def _choose_span(
    grid: OccupancyGrid, row: int, col: int, rand_val: int, rules: LayoutRules,
) -> tuple[int, int]:
    """Return (row_span, col_span) for a cell anchored at a free position."""
    row_span = col_span = 1

    if rules.wants_col_span(rand_val) and grid.is_free(row, col + 1):
        col_span = rules.max_span

    if rules.wants_row_span(rand_val) and grid.is_free(row + 1, col):
        # The whole row below the (possibly widened) cell must be free
        if grid.block_is_free(row + 1, col, rules.max_span - 1, col_span):
            row_span = rules.max_span

    if not grid.block_is_free(row, col, row_span, col_span):
        return (1, 1)
    return (row_span, col_span)


def generate_layout(
    rows: int,
    cols: int,
    pattern_seed: int,
    *,
    rules: LayoutRules = LAYOUT_RULES,
) -> list[Cell]:
    """Tile a rows × cols grid with 1×1, 1×2, 2×1 and 2×2 cells.

    Positions are scanned row-major; each free position becomes the anchor
    of the next cell.  The result covers every position exactly once and is
    identical for identical arguments.

    Parameters
    ----------
    rows, cols : int
        Grid size (both >= 1).
    pattern_seed : int
        Reproducibility token driving the span decisions.
    rules : LayoutRules
        Span thresholds (default ``LAYOUT_RULES``).

    Returns
    -------
    list[Cell]
        Cells in placement order.
    """
    grid = OccupancyGrid(rows, cols)
    cells: list[Cell] = []
    cell_index = 0

    for r in range(rows):
        for c in range(cols):
            if grid.is_occupied(r, c):
                continue

            rand_val = span_value(pattern_seed, cell_index, rules)
            row_span, col_span = _choose_span(grid, r, c, rand_val, rules)

            grid.occupy(r, c, row_span, col_span)
            cells.append(Cell(row=r, col=c, row_span=row_span, col_span=col_span))
            cell_index += 1

    log.debug(
        "Layout %dx%d seed=%d: %d cells (%d spanning)",
        cols, rows, pattern_seed, len(cells),
        sum(1 for cell in cells if cell.area > 1),
    )
    return cells


def coverage_errors(cells: list[Cell], rows: int, cols: int) -> list[str]:
    """Check that cells partition the grid. Returns error messages (empty = valid)."""
    errors: list[str] = []
    seen: dict[tuple[int, int], Cell] = {}

    for cell in cells:
        if cell.row_span < 1 or cell.col_span < 1:
            errors.append(f"Cell at ({cell.row}, {cell.col}) has a non-positive span")
            continue
        for pos in cell.positions():
            r, c = pos
            if not (0 <= r < rows and 0 <= c < cols):
                errors.append(f"Cell at ({cell.row}, {cell.col}) extends outside the grid at {pos}")
            elif pos in seen:
                other = seen[pos]
                errors.append(
                    f"Cells at ({other.row}, {other.col}) and ({cell.row}, {cell.col}) "
                    f"both cover {pos}"
                )
            else:
                seen[pos] = cell

    missing = rows * cols - len(seen)
    if missing > 0:
        errors.append(f"{missing} grid position(s) not covered")
    return errors
