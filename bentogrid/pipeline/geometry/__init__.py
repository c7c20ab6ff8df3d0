"""Geometry — container, grid parameters and derived cell metrics.

Submodules:
  models      Input/output dataclasses, SpacingClass, GridDoesNotFitError.
  calculator  Gutter, cell size and corner radius derivation.
"""

from .models import (
    SpacingClass, ContainerBounds, GridSpec, GridGeometry, GridDoesNotFitError,
)
from .calculator import compute_geometry, gutter_size, corner_radius

__all__ = [
    # Models
    "SpacingClass", "ContainerBounds", "GridSpec", "GridGeometry",
    "GridDoesNotFitError",
    # Calculator
    "compute_geometry", "gutter_size", "corner_radius",
]
