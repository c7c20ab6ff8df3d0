"""Pipeline stages — geometry, layout, compositor, seed.

Each stage is a pure function of its inputs.  The stages in order:

  geometry    — gutter, cell size and corner radius for the container
  layout      — span assignment on the rows × cols grid
  compositor  — pixel rectangles from cells + geometry
  seed        — hex code that reproduces a parameter set (used by callers)

``generate_bento`` in ``bento`` runs the first three for one pattern seed.
"""

from .bento import BentoGrid, generate_bento, bento_to_dict, parse_bento

__all__ = ["BentoGrid", "generate_bento", "bento_to_dict", "parse_bento"]
