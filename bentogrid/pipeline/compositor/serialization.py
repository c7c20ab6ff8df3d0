"""Rectangle serialization — JSON conversion."""

from __future__ import annotations

from .models import PlacedRectangle


def rectangles_to_dict(rects: list[PlacedRectangle]) -> list[dict]:
    """Serialize placed rectangles to JSON-safe dicts."""
    return [
        {
            "x": r.x,
            "y": r.y,
            "width": r.width,
            "height": r.height,
            "corner_radius": r.corner_radius,
        }
        for r in rects
    ]


def parse_rectangles(data: list) -> list[PlacedRectangle]:
    return [
        PlacedRectangle(
            x=float(r["x"]),
            y=float(r["y"]),
            width=float(r["width"]),
            height=float(r["height"]),
            corner_radius=int(r["corner_radius"]),
        )
        for r in data
    ]
