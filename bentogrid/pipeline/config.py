"""Shared constants for the bento pipeline.

The span thresholds used by the **layout** stage and the field limits used
by the **seed** codec live here as frozen dataclasses, so a density preset
or a wider seed field can be introduced by building another instance
instead of editing the algorithms.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LayoutRules:
    """Span decision parameters for the occupancy-grid scan.

    ``rand_val = (pattern_seed + cell_index * index_multiplier) % rand_modulus``
    decides the span of each placed cell.
    """

    index_multiplier: int = 13
    rand_modulus: int = 100

    col_span_below: int = 40
    """rand_val strictly below this lets a cell take two columns."""

    row_span_above: int = 60
    row_span_below: int = 80
    """rand_val strictly between these lets a cell take two rows."""

    max_span: int = 2

    def wants_col_span(self, rand_val: int) -> bool:
        return rand_val < self.col_span_below

    def wants_row_span(self, rand_val: int) -> bool:
        return self.row_span_above < rand_val < self.row_span_below


@dataclass(frozen=True)
class SeedRules:
    """Bit layout of a seed code and the accepted import ranges.

    All widths are in bits; the shifts place each field in a 32-bit word.
    """

    rows_bits: int = 8
    cols_bits: int = 4
    spacing_bits: int = 2
    margin_bits: int = 10
    pattern_bits: int = 8

    rows_shift: int = 24
    cols_shift: int = 20
    spacing_shift: int = 18
    margin_shift: int = 8

    pattern_step: int = 17
    """Added to the pattern seed when the caller asks for the next variant."""

    max_rows: int = 20
    max_cols: int = 20
    max_margin: float = 200

    @property
    def pattern_modulus(self) -> int:
        return 1 << self.pattern_bits


@dataclass(frozen=True)
class GridDefaults:
    """Initial values offered to a user before any seed is imported."""

    rows: int = 4
    cols: int = 3
    margin: float = 32
    spacing_code: int = 2


CORNER_RADIUS_DIVISOR = 10

# Module-level singletons
LAYOUT_RULES = LayoutRules()
SEED_RULES = SeedRules()
GRID_DEFAULTS = GridDefaults()
