"""Layout serialization — JSON conversion."""

from __future__ import annotations

from .models import Cell


def cells_to_dict(cells: list[Cell]) -> list[dict]:
    """Serialize a cell list to JSON-safe dicts."""
    return [
        {
            "row": c.row,
            "col": c.col,
            "row_span": c.row_span,
            "col_span": c.col_span,
        }
        for c in cells
    ]


def parse_cells(data: list) -> list[Cell]:
    """Parse a list of cell dicts back into Cells (spans default to 1)."""
    return [
        Cell(
            row=int(c["row"]),
            col=int(c["col"]),
            row_span=int(c.get("row_span", 1)),
            col_span=int(c.get("col_span", 1)),
        )
        for c in data
    ]
