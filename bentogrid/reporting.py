"""Text summary of an accepted bento layout."""

from __future__ import annotations

from bentogrid.pipeline import BentoGrid


def format_summary(grid: BentoGrid) -> str:
    """Summary shown to the user once a layout has been applied."""
    lines = []
    lines.append("Successfully created a Bento Grid!")
    lines.append("")
    lines.append(f"Cells: {len(grid.cells)}")
    lines.append(
        f"Gutter: {grid.geometry.gutter_size}px ({grid.geometry.gutter_percentage:g}%)"
    )
    lines.append(f"Corner Radius: {grid.geometry.corner_radius}px")
    lines.append(f"Grid: {grid.spec.cols} x {grid.spec.rows}")
    lines.append(f"Seed: {grid.seed_code}")
    return "\n".join(lines)
