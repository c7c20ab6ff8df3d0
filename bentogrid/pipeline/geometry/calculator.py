"""Cell, gutter and corner-radius derivation."""

from __future__ import annotations

import logging
import math

from bentogrid.pipeline.config import CORNER_RADIUS_DIVISOR

from .models import ContainerBounds, GridSpec, GridGeometry, GridDoesNotFitError


log = logging.getLogger("bentogrid.geometry")


def gutter_size(
    available_width: float, available_height: float,
    rows: int, cols: int, gutter_percentage: float,
) -> int:
    """Gutter in whole pixels, sized from the smaller gutter-less cell side."""
    base_cell_width = available_width / cols
    base_cell_height = available_height / rows
    smallest = min(base_cell_width, base_cell_height)
    return math.ceil(smallest * (gutter_percentage / 100))


def corner_radius(cell_width: float, cell_height: float) -> int:
    """Corner radius proportional to the square root of a single cell's area.

    Spanning cells reuse the single-cell radius so every tile reads the
    same.
    """
    return math.ceil(math.sqrt(cell_width * cell_height) / CORNER_RADIUS_DIVISOR)


def compute_geometry(container: ContainerBounds, spec: GridSpec) -> GridGeometry:
    """Derive the uniform cell metrics for a grid inside a container.

    Parameters
    ----------
    container : ContainerBounds
        The host rectangle to fill.
    spec : GridSpec
        Rows, columns, margin and spacing class.

    Returns
    -------
    GridGeometry
        Cell size, gutter and corner radius.

    Raises
    ------
    GridDoesNotFitError
        If either cell dimension is not positive.
    """
    pct = spec.spacing.gutter_percentage
    available_width = container.width - 2 * spec.margin
    available_height = container.height - 2 * spec.margin

    gutter = gutter_size(
        available_width, available_height, spec.rows, spec.cols, pct,
    )

    cell_width = (available_width - gutter * (spec.cols - 1)) / spec.cols
    cell_height = (available_height - gutter * (spec.rows - 1)) / spec.rows

    if cell_width <= 0 or cell_height <= 0:
        log.debug(
            "No room for %dx%d grid in %.1fx%.1f (margin %.1f, gutter %d)",
            spec.cols, spec.rows, container.width, container.height,
            spec.margin, gutter,
        )
        raise GridDoesNotFitError(cell_width, cell_height)

    radius = corner_radius(cell_width, cell_height)
    log.debug(
        "Geometry: cell %.2fx%.2f, gutter %dpx (%.1f%%), radius %dpx",
        cell_width, cell_height, gutter, pct, radius,
    )
    return GridGeometry(
        cell_width=cell_width,
        cell_height=cell_height,
        gutter_size=gutter,
        corner_radius=radius,
        gutter_percentage=pct,
    )
