"""Bento facade — runs geometry, layout and compositor for one seed."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import SEED_RULES
from .geometry import (
    ContainerBounds, GridSpec, GridGeometry, SpacingClass, compute_geometry,
)
from .layout import Cell, generate_layout, cells_to_dict, parse_cells
from .compositor import PlacedRectangle, compose, rectangles_to_dict, parse_rectangles
from .seed import encode_seed


log = logging.getLogger("bentogrid.pipeline")


@dataclass
class BentoGrid:
    """A complete layout, ready for the host to draw."""

    container: ContainerBounds
    spec: GridSpec
    pattern_seed: int
    geometry: GridGeometry
    cells: list[Cell]
    rectangles: list[PlacedRectangle]

    @property
    def seed_code(self) -> str:
        return encode_seed(
            self.spec.rows, self.spec.cols, self.spec.spacing.code,
            self.spec.margin, self.pattern_seed,
        )

    @property
    def name(self) -> str:
        """Group name the host gives the accepted layout."""
        return f"Bento Grid ({self.spec.cols}×{self.spec.rows})"


def generate_bento(
    container: ContainerBounds, spec: GridSpec, pattern_seed: int,
) -> BentoGrid:
    """Build the full layout for one pattern seed.

    The seed is reduced to the seed code's pattern field first, so
    ``seed_code`` always reproduces the returned cells.

    Raises
    ------
    GridDoesNotFitError
        If the grid leaves no positive cell area.
    """
    pattern_seed %= SEED_RULES.pattern_modulus
    geometry = compute_geometry(container, spec)
    cells = generate_layout(spec.rows, spec.cols, pattern_seed)
    rects = compose(cells, geometry, container, spec.margin)
    log.info(
        "Bento %dx%d seed=%d: %d cells, gutter %dpx, radius %dpx",
        spec.cols, spec.rows, pattern_seed, len(cells),
        geometry.gutter_size, geometry.corner_radius,
    )
    return BentoGrid(
        container=container,
        spec=spec,
        pattern_seed=pattern_seed,
        geometry=geometry,
        cells=cells,
        rectangles=rects,
    )


# ── Serialization ──────────────────────────────────────────────────


def bento_to_dict(grid: BentoGrid) -> dict:
    """Serialize a BentoGrid to a JSON-safe dict."""
    return {
        "name": grid.name,
        "seed_code": grid.seed_code,
        "container": {
            "width": grid.container.width,
            "height": grid.container.height,
            "origin_x": grid.container.origin_x,
            "origin_y": grid.container.origin_y,
        },
        "grid": {
            "rows": grid.spec.rows,
            "cols": grid.spec.cols,
            "margin": grid.spec.margin,
            "spacing": grid.spec.spacing.name.lower(),
        },
        "pattern_seed": grid.pattern_seed,
        "geometry": {
            "cell_width": grid.geometry.cell_width,
            "cell_height": grid.geometry.cell_height,
            "gutter_size": grid.geometry.gutter_size,
            "corner_radius": grid.geometry.corner_radius,
            "gutter_percentage": grid.geometry.gutter_percentage,
        },
        "cells": cells_to_dict(grid.cells),
        "rectangles": rectangles_to_dict(grid.rectangles),
    }


def parse_bento(data: dict) -> BentoGrid:
    """Parse a bento dict back into a BentoGrid."""
    c = data["container"]
    g = data["grid"]
    geo = data["geometry"]
    return BentoGrid(
        container=ContainerBounds(
            width=float(c["width"]),
            height=float(c["height"]),
            origin_x=float(c.get("origin_x", 0.0)),
            origin_y=float(c.get("origin_y", 0.0)),
        ),
        spec=GridSpec(
            rows=int(g["rows"]),
            cols=int(g["cols"]),
            margin=float(g.get("margin", 0.0)),
            spacing=SpacingClass.from_name(g.get("spacing", "comfortable")),
        ),
        pattern_seed=int(data["pattern_seed"]),
        geometry=GridGeometry(
            cell_width=float(geo["cell_width"]),
            cell_height=float(geo["cell_height"]),
            gutter_size=int(geo["gutter_size"]),
            corner_radius=int(geo["corner_radius"]),
            gutter_percentage=float(geo["gutter_percentage"]),
        ),
        cells=parse_cells(data["cells"]),
        rectangles=parse_rectangles(data["rectangles"]),
    )
