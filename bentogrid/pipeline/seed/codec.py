"""Seed code packing — a full parameter set in one 32-bit hex string.

Bit layout, most significant first::

    31..24  rows          (8 bits)
    23..20  cols          (4 bits)
    19..18  spacing code  (2 bits)
    17..8   margin        (10 bits, whole pixels)
     7..0   pattern seed  (8 bits)

Fields wider than their slot are masked, not rejected, so any tuple
encodes; only values inside the field widths round-trip exactly.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from bentogrid.pipeline.config import SEED_RULES, SeedRules


log = logging.getLogger("bentogrid.seed")

_HEX_RE = re.compile(r"^(?:0[xX])?([0-9A-Fa-f]+)$")
_WORD_MASK = 0xFFFFFFFF


@dataclass(frozen=True)
class SeedSettings:
    """Decoded seed code.  Values are raw field contents, not range-checked."""

    rows: int
    cols: int
    spacing: int
    margin: int
    pattern_seed: int


class InvalidSeedError(Exception):
    """Raised when a seed code is not a hexadecimal string."""

    def __init__(self, code: str, reason: str = "not a hexadecimal string") -> None:
        self.code = code
        self.reason = reason
        super().__init__(f"Invalid seed code '{code}': {reason}")


def _mask(bits: int) -> int:
    return (1 << bits) - 1


def _pack_field(name: str, value: int, bits: int) -> int:
    masked = value & _mask(bits)
    if masked != value:
        log.warning(
            "Seed field '%s' = %d does not fit in %d bits, truncated to %d",
            name, value, bits, masked,
        )
    return masked


def encode_seed(
    rows: int,
    cols: int,
    spacing_code: int,
    margin: float,
    pattern_seed: int,
    *,
    rules: SeedRules = SEED_RULES,
) -> str:
    """Pack a parameter set into an upper-case hex string (no prefix, no padding)."""
    word = (
        _pack_field("rows", int(rows), rules.rows_bits) << rules.rows_shift
        | _pack_field("cols", int(cols), rules.cols_bits) << rules.cols_shift
        | _pack_field("spacing", int(spacing_code), rules.spacing_bits) << rules.spacing_shift
        | _pack_field("margin", int(margin), rules.margin_bits) << rules.margin_shift
        | _pack_field("pattern_seed", int(pattern_seed), rules.pattern_bits)
    )
    return format(word, "X")


def decode_seed(code: str, *, rules: SeedRules = SEED_RULES) -> SeedSettings:
    """Unpack a seed code.

    Whitespace anywhere in ``code`` is ignored and a ``0x`` prefix is
    accepted.  Digits beyond the low 32 bits are discarded.

    Raises
    ------
    InvalidSeedError
        If what remains is empty or not hexadecimal.
    """
    cleaned = re.sub(r"\s", "", code or "")
    match = _HEX_RE.match(cleaned)
    if match is None:
        raise InvalidSeedError(code)

    word = int(match.group(1), 16) & _WORD_MASK
    return SeedSettings(
        rows=(word >> rules.rows_shift) & _mask(rules.rows_bits),
        cols=(word >> rules.cols_shift) & _mask(rules.cols_bits),
        spacing=(word >> rules.spacing_shift) & _mask(rules.spacing_bits),
        margin=(word >> rules.margin_shift) & _mask(rules.margin_bits),
        pattern_seed=word & _mask(rules.pattern_bits),
    )
