"""Compositor output dataclass."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlacedRectangle:
    """A rounded tile in the host's pixel space.

    ``(x, y)`` is the top-left corner; the tile extends to ``x + width``
    and down to ``y - height``.
    """

    x: float
    y: float
    width: float
    height: float
    corner_radius: int

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """(min_x, min_y, max_x, max_y) as used by shapely."""
        return (self.x, self.y - self.height, self.x + self.width, self.y)
