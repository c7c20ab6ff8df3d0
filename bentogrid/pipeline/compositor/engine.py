"""Map grid cells onto pixel-space rectangles."""

from __future__ import annotations

from bentogrid.pipeline.geometry.models import ContainerBounds, GridGeometry
from bentogrid.pipeline.layout.models import Cell

from .models import PlacedRectangle


def place_cell(
    cell: Cell, geometry: GridGeometry, container: ContainerBounds, margin: float,
) -> PlacedRectangle:
    """Pixel rectangle for one cell; rows step towards −y."""
    pitch_x = geometry.cell_width + geometry.gutter_size
    pitch_y = geometry.cell_height + geometry.gutter_size
    return PlacedRectangle(
        x=container.origin_x + margin + cell.col * pitch_x,
        y=container.origin_y - margin - cell.row * pitch_y,
        width=cell.col_span * geometry.cell_width + (cell.col_span - 1) * geometry.gutter_size,
        height=cell.row_span * geometry.cell_height + (cell.row_span - 1) * geometry.gutter_size,
        corner_radius=geometry.corner_radius,
    )


def compose(
    cells: list[Cell],
    geometry: GridGeometry,
    container: ContainerBounds,
    margin: float,
) -> list[PlacedRectangle]:
    """Place every cell, preserving input order."""
    return [place_cell(cell, geometry, container, margin) for cell in cells]
