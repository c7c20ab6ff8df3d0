"""Seed import helpers — range checks, pattern-seed stepping, fallbacks."""

from __future__ import annotations

import logging
import random

from bentogrid.pipeline.config import SEED_RULES, SeedRules
from bentogrid.pipeline.geometry.models import GridSpec, SpacingClass

from .codec import SeedSettings, InvalidSeedError, decode_seed


log = logging.getLogger("bentogrid.seed")


def settings_in_range(settings: SeedSettings, rules: SeedRules = SEED_RULES) -> bool:
    """True if decoded rows, cols and margin are usable grid parameters."""
    return (
        0 < settings.rows <= rules.max_rows
        and 0 < settings.cols <= rules.max_cols
        and 0 <= settings.margin <= rules.max_margin
    )


def apply_seed_code(spec: GridSpec, code: str, rules: SeedRules = SEED_RULES) -> GridSpec:
    """Return ``spec`` with the grid parameters stored in ``code``.

    An out-of-range decode leaves ``spec`` untouched.  An unknown spacing
    code falls back to COMFORTABLE.

    Raises
    ------
    InvalidSeedError
        If ``code`` is not hexadecimal.
    """
    settings = decode_seed(code, rules=rules)
    if not settings_in_range(settings, rules):
        log.info(
            "Ignoring seed '%s': rows=%d cols=%d margin=%d out of range",
            code, settings.rows, settings.cols, settings.margin,
        )
        return spec
    return GridSpec(
        rows=settings.rows,
        cols=settings.cols,
        margin=float(settings.margin),
        spacing=SpacingClass.from_code(settings.spacing),
    )


def random_pattern_seed(rng: random.Random | None = None, rules: SeedRules = SEED_RULES) -> int:
    """A pattern seed drawn uniformly from the encodable range."""
    rng = rng or random.Random()
    return rng.randrange(rules.pattern_modulus)


def next_pattern_seed(seed: int, rules: SeedRules = SEED_RULES) -> int:
    return (seed + rules.pattern_step) % rules.pattern_modulus


def resolve_pattern_seed(
    code: str | None, rng: random.Random | None = None, rules: SeedRules = SEED_RULES,
) -> int:
    """Pattern seed carried by ``code``, or a random one if there is none."""
    if code and code.strip():
        try:
            return decode_seed(code, rules=rules).pattern_seed
        except InvalidSeedError as e:
            log.warning("%s; using a random pattern seed", e)
    return random_pattern_seed(rng, rules)
