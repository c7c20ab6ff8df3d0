"""Tests for the preview session seed history.

Validates:
  - next appends (seed + 17) % 256 at the end, replays stored seeds otherwise
  - previous stops at the first entry
  - regenerate truncates everything after the cursor
  - revisiting a seed yields the identical layout
  - export / accept carry the current seed
"""

from __future__ import annotations

import random
import unittest

from bentogrid.pipeline.geometry import ContainerBounds, GridSpec, GridDoesNotFitError
from bentogrid.pipeline.layout import generate_layout
from bentogrid.pipeline.seed import encode_seed
from bentogrid.reporting import format_summary
from bentogrid.session import PreviewSession
from tests.bento_fixture import make_container, make_spec


class TestPreviewSession(unittest.TestCase):

    def setUp(self):
        self.session = PreviewSession(make_container(), make_spec(), pattern_seed=0)

    def test_initial_state(self):
        self.assertEqual(self.session.history, [0])
        self.assertEqual(self.session.cursor, 0)
        self.assertFalse(self.session.can_go_back)

    def test_next_appends_step(self):
        grid = self.session.next()
        self.assertEqual(self.session.history, [0, 17])
        self.assertEqual(grid.pattern_seed, 17)
        self.assertTrue(self.session.can_go_back)

    def test_next_wraps_at_256(self):
        session = PreviewSession(make_container(), make_spec(), pattern_seed=250)
        session.next()
        self.assertEqual(session.current_seed, 11)

    def test_previous_then_next_replays(self):
        self.session.next()
        self.session.next()
        self.session.previous()
        self.assertEqual(self.session.current_seed, 17)
        self.session.next()
        self.assertEqual(self.session.current_seed, 34)
        self.assertEqual(self.session.history, [0, 17, 34])

    def test_previous_at_start_is_noop(self):
        grid = self.session.previous()
        self.assertEqual(self.session.cursor, 0)
        self.assertEqual(grid.pattern_seed, 0)

    def test_regenerate_truncates_forward_history(self):
        rng = random.Random(3)
        expected = random.Random(3).randrange(256)
        session = PreviewSession(make_container(), make_spec(), pattern_seed=0, rng=rng)
        session.next()
        session.next()
        session.previous()
        session.regenerate()
        self.assertEqual(session.history, [0, 17, expected])
        self.assertEqual(session.cursor, 2)

    def test_revisit_gives_same_layout(self):
        first = self.session.current()
        self.session.next()
        back = self.session.previous()
        self.assertEqual(back.cells, first.cells)
        self.assertEqual(back.rectangles, first.rectangles)

    def test_export_seed(self):
        self.session.next()
        self.assertEqual(self.session.export_seed(), encode_seed(4, 3, 2, 32, 17))

    def test_accept(self):
        self.session.next()
        grid = self.session.accept()
        self.assertEqual(grid.pattern_seed, 17)
        self.assertEqual(grid.seed_code, self.session.export_seed())

    def test_large_seed_reduced_to_code_range(self):
        session = PreviewSession(make_container(), make_spec(), pattern_seed=300)
        self.assertEqual(session.history, [44])
        self.assertEqual(session.export_seed(), encode_seed(4, 3, 2, 32, 44))
        self.assertEqual(session.current().cells, generate_layout(4, 3, 44))

    def test_start_with_random_seed(self):
        expected = random.Random(42).randrange(256)
        session = PreviewSession.start(make_container(), make_spec(), rng=random.Random(42))
        self.assertEqual(session.history, [expected])

    def test_grid_that_does_not_fit(self):
        with self.assertRaises(GridDoesNotFitError):
            PreviewSession(ContainerBounds(width=100, height=100), GridSpec(rows=1, cols=1, margin=60), 0)


class TestSummary(unittest.TestCase):

    def test_summary_text(self):
        grid = PreviewSession(make_container(), make_spec(), pattern_seed=0).accept()
        text = format_summary(grid)
        self.assertIn("Cells: 8", text)
        self.assertIn("Gutter: 7px (5%)", text)
        self.assertIn("Corner Radius: 18px", text)
        self.assertIn("Grid: 3 x 4", text)
        self.assertIn("Seed: 4382000", text)

    def test_fractional_gutter_percentage(self):
        from bentogrid.pipeline.geometry import SpacingClass
        grid = PreviewSession(make_container(), make_spec(spacing=SpacingClass.TIGHT), 0).accept()
        self.assertIn("(2.5%)", format_summary(grid))


if __name__ == "__main__":
    unittest.main()
