"""Compositor — turns grid cells into pixel rectangles for the host.

Submodules:
  models        PlacedRectangle dataclass.
  engine        Cell → rectangle arithmetic (compose).
  validation    Containment / overlap checks (validate_composition).
  serialization JSON conversion (rectangles_to_dict, parse_rectangles).
"""

from .models import PlacedRectangle
from .engine import compose, place_cell
from .validation import validate_composition
from .serialization import rectangles_to_dict, parse_rectangles

__all__ = [
    "PlacedRectangle",
    "compose", "place_cell",
    "validate_composition",
    "rectangles_to_dict", "parse_rectangles",
]
