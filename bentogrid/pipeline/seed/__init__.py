"""Seed — compact reproducible descriptor of a bento layout.

Submodules:
  codec     32-bit hex packing (encode_seed, decode_seed).
  settings  Import range checks and pattern-seed stepping.
"""

from .codec import SeedSettings, InvalidSeedError, encode_seed, decode_seed
from .settings import (
    settings_in_range, apply_seed_code,
    random_pattern_seed, next_pattern_seed, resolve_pattern_seed,
)

__all__ = [
    # Codec
    "SeedSettings", "InvalidSeedError", "encode_seed", "decode_seed",
    # Settings
    "settings_in_range", "apply_seed_code",
    "random_pattern_seed", "next_pattern_seed", "resolve_pattern_seed",
]
