"""Layout output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cell:
    """A placed tile anchored at its top-left grid position."""

    row: int
    col: int
    row_span: int = 1
    col_span: int = 1

    def positions(self) -> list[tuple[int, int]]:
        """All (row, col) grid positions covered by this cell."""
        return [
            (r, c)
            for r in range(self.row, self.row + self.row_span)
            for c in range(self.col, self.col + self.col_span)
        ]

    @property
    def area(self) -> int:
        return self.row_span * self.col_span
