"""Layout — assigns row/column spans to cells on a fixed grid.

Submodules:
  models        Cell dataclass.
  grid          OccupancyGrid scratch matrix.
  engine        Greedy row-major placement (generate_layout).
  serialization JSON conversion (cells_to_dict, parse_cells).
"""

from .models import Cell
from .grid import OccupancyGrid
from .engine import generate_layout, span_value, coverage_errors
from .serialization import cells_to_dict, parse_cells

__all__ = [
    # Models
    "Cell", "OccupancyGrid",
    # Engine
    "generate_layout", "span_value", "coverage_errors",
    # Serialization
    "cells_to_dict", "parse_cells",
]
