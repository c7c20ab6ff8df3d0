"""
Preview session — steps through candidate layouts for one container.

The session keeps an ordered seed history with a cursor:

  next        move onto the following stored seed, or append
              ``(seed + 17) % 256`` when at the end
  previous    move back one entry (no-op at the start)
  regenerate  drop every entry after the cursor, append a random seed

Layouts are never cached; ``current()`` re-derives the layout from the
seed under the cursor, so revisiting a seed always yields the same tiles.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from bentogrid.pipeline import BentoGrid, generate_bento
from bentogrid.pipeline.config import SEED_RULES
from bentogrid.pipeline.geometry import ContainerBounds, GridSpec, compute_geometry
from bentogrid.pipeline.seed import (
    encode_seed, next_pattern_seed, random_pattern_seed,
)


log = logging.getLogger("bentogrid.session")


@dataclass
class PreviewSession:
    container: ContainerBounds
    spec: GridSpec
    pattern_seed: int
    rng: random.Random = field(default_factory=random.Random)
    history: list[int] = field(init=False)
    cursor: int = field(init=False, default=0)

    def __post_init__(self) -> None:
        # Fail before the first preview if the grid cannot fit
        compute_geometry(self.container, self.spec)
        self.pattern_seed %= SEED_RULES.pattern_modulus
        self.history = [self.pattern_seed]

    @classmethod
    def start(
        cls,
        container: ContainerBounds,
        spec: GridSpec,
        pattern_seed: int | None = None,
        rng: random.Random | None = None,
    ) -> PreviewSession:
        """Open a session, drawing a random first seed when none is given."""
        rng = rng or random.Random()
        if pattern_seed is None:
            pattern_seed = random_pattern_seed(rng)
        return cls(container=container, spec=spec, pattern_seed=pattern_seed, rng=rng)

    # ── Navigation ─────────────────────────────────────────────────

    @property
    def current_seed(self) -> int:
        return self.history[self.cursor]

    @property
    def can_go_back(self) -> bool:
        return self.cursor > 0

    def current(self) -> BentoGrid:
        return generate_bento(self.container, self.spec, self.current_seed)

    def next(self) -> BentoGrid:
        if self.cursor < len(self.history) - 1:
            self.cursor += 1
        else:
            self.history.append(next_pattern_seed(self.current_seed))
            self.cursor = len(self.history) - 1
        log.debug("next -> seed %d (%d/%d)", self.current_seed, self.cursor + 1, len(self.history))
        return self.current()

    def previous(self) -> BentoGrid:
        if self.can_go_back:
            self.cursor -= 1
        log.debug("previous -> seed %d (%d/%d)", self.current_seed, self.cursor + 1, len(self.history))
        return self.current()

    def regenerate(self) -> BentoGrid:
        del self.history[self.cursor + 1:]
        self.history.append(random_pattern_seed(self.rng))
        self.cursor = len(self.history) - 1
        log.debug("regenerate -> seed %d", self.current_seed)
        return self.current()

    # ── Output ─────────────────────────────────────────────────────

    def export_seed(self) -> str:
        """Seed code that recreates the layout currently shown."""
        return encode_seed(
            self.spec.rows, self.spec.cols, self.spec.spacing.code,
            self.spec.margin, self.current_seed,
        )

    def accept(self) -> BentoGrid:
        grid = self.current()
        log.info("Accepted %s, seed %s", grid.name, grid.seed_code)
        return grid
