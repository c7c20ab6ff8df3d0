"""Geometry input/output dataclasses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SpacingClass(Enum):
    """Gutter style; each member carries its seed code and gutter percentage."""

    TIGHT = (1, 2.5)
    COMFORTABLE = (2, 5.0)
    SPACIOUS = (3, 7.5)

    def __init__(self, code: int, gutter_percentage: float) -> None:
        self.code = code
        self.gutter_percentage = gutter_percentage

    @classmethod
    def from_code(cls, code: int) -> SpacingClass:
        """Map a seed-code spacing value to a class (unknown → COMFORTABLE)."""
        for member in cls:
            if member.code == code:
                return member
        return cls.COMFORTABLE

    @classmethod
    def from_name(cls, name: str) -> SpacingClass:
        return cls[name.strip().upper()]


@dataclass(frozen=True)
class ContainerBounds:
    """The host's container rectangle in its pixel space.

    ``origin_x``/``origin_y`` is the top-left corner; the host's y axis
    grows upwards, so the container extends to ``origin_y - height``.
    """

    width: float
    height: float
    origin_x: float = 0.0
    origin_y: float = 0.0

    @classmethod
    def from_bounds(
        cls, left: float, top: float, right: float, bottom: float,
    ) -> ContainerBounds:
        """Build from host geometric bounds ``(left, top, right, bottom)``."""
        return cls(
            width=right - left,
            height=top - bottom,
            origin_x=left,
            origin_y=top,
        )


@dataclass(frozen=True)
class GridSpec:
    rows: int
    cols: int
    margin: float = 0.0
    spacing: SpacingClass = SpacingClass.COMFORTABLE

    def __post_init__(self) -> None:
        if self.rows < 1:
            raise ValueError(f"rows must be >= 1, got {self.rows}")
        if self.cols < 1:
            raise ValueError(f"cols must be >= 1, got {self.cols}")
        if self.margin < 0:
            raise ValueError(f"margin must be >= 0, got {self.margin}")


@dataclass(frozen=True)
class GridGeometry:
    """Uniform cell metrics shared by every cell of one layout."""

    cell_width: float
    cell_height: float
    gutter_size: int
    corner_radius: int
    gutter_percentage: float


class GridDoesNotFitError(Exception):
    """Raised when margin, gutters and grid counts leave no positive cell area."""

    def __init__(self, cell_width: float, cell_height: float) -> None:
        self.cell_width = cell_width
        self.cell_height = cell_height
        super().__init__(
            f"Grid doesn't fit (cell {cell_width:.2f} x {cell_height:.2f}). "
            f"Reduce margins, rows, or columns."
        )
