"""Occupancy grid — marks grid positions as free or covered.

Scratch state for one layout pass: the engine creates a fresh grid per
call and drops it when the call returns.
"""

from __future__ import annotations


FREE = 0
OCCUPIED = 1


class OccupancyGrid:
    """A rows × cols boolean matrix stored row-major in a bytearray."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._cells = bytearray(rows * cols)

    # ── Cell queries ───────────────────────────────────────────────

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_free(self, row: int, col: int) -> bool:
        """Out-of-bounds positions are never free."""
        if not self.in_bounds(row, col):
            return False
        return self._cells[row * self.cols + col] == FREE

    def is_occupied(self, row: int, col: int) -> bool:
        if not self.in_bounds(row, col):
            return True
        return self._cells[row * self.cols + col] != FREE

    def block_is_free(
        self, row: int, col: int, row_span: int, col_span: int,
    ) -> bool:
        """True if every position of the block is inside the grid and free."""
        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                if not self.is_free(r, c):
                    return False
        return True

    # ── Cell mutation ──────────────────────────────────────────────

    def occupy(self, row: int, col: int, row_span: int = 1, col_span: int = 1) -> None:
        for r in range(row, row + row_span):
            for c in range(col, col + col_span):
                if self.in_bounds(r, c):
                    self._cells[r * self.cols + c] = OCCUPIED
