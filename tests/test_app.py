"""Tests for the command-line interface.

Run: python -m pytest tests/test_app.py -v
"""

from __future__ import annotations

import io
import json
import unittest
from contextlib import redirect_stderr, redirect_stdout

from bentogrid.app import main
from bentogrid.pipeline.layout import cells_to_dict, generate_layout
from bentogrid.pipeline.seed import decode_seed
from tests.bento_fixture import REFERENCE_TRACE_4x3_SEED0


def _run(*argv: str) -> tuple[int, str, str]:
    out, err = io.StringIO(), io.StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        code = main(list(argv))
    return code, out.getvalue(), err.getvalue()


class TestGenerateCommand(unittest.TestCase):

    def test_json_output(self):
        code, out, _ = _run("generate", "--width", "800", "--height", "600", "--seed", "0")
        self.assertEqual(code, 0)
        data = json.loads(out)
        cells = [(c["row"], c["col"], c["row_span"], c["col_span"]) for c in data["cells"]]
        self.assertEqual(cells, REFERENCE_TRACE_4x3_SEED0)
        self.assertEqual(len(data["rectangles"]), 8)
        self.assertEqual(data["seed_code"], "4382000")

    def test_seed_code_overrides_options(self):
        code, out, _ = _run(
            "generate", "--width", "800", "--height", "600",
            "--rows", "2", "--cols", "2", "--code", "438200D",
        )
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["grid"]["rows"], 4)
        self.assertEqual(data["grid"]["cols"], 3)
        self.assertEqual(data["pattern_seed"], 13)

    def test_invalid_code_falls_back_to_random_seed(self):
        code, out, _ = _run(
            "generate", "--width", "800", "--height", "600",
            "--rows", "2", "--cols", "2", "--code", "zz",
        )
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertIn(data["pattern_seed"], range(256))
        self.assertEqual(data["grid"]["rows"], 2)
        self.assertEqual(data["grid"]["cols"], 2)

    def test_large_seed_matches_exported_code(self):
        code, out, _ = _run("generate", "--width", "800", "--height", "600", "--seed", "300")
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(data["pattern_seed"], 44)
        settings = decode_seed(data["seed_code"])
        cells = cells_to_dict(generate_layout(settings.rows, settings.cols, settings.pattern_seed))
        self.assertEqual(cells, data["cells"])

    def test_summary_output(self):
        code, out, _ = _run(
            "generate", "--width", "800", "--height", "600", "--seed", "0", "--summary",
        )
        self.assertEqual(code, 0)
        self.assertIn("Cells: 8", out)

    def test_grid_does_not_fit(self):
        code, out, err = _run(
            "generate", "--width", "100", "--height", "100", "--margin", "60", "--seed", "1",
        )
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("doesn't fit", err)


class TestSeedCommands(unittest.TestCase):

    def test_encode(self):
        code, out, _ = _run("encode", "--rows", "4", "--cols", "3", "--margin", "32", "--seed", "13")
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "438200D")

    def test_decode(self):
        code, out, _ = _run("decode", "438200D")
        self.assertEqual(code, 0)
        self.assertEqual(
            json.loads(out),
            {"rows": 4, "cols": 3, "spacing": 2, "margin": 32, "pattern_seed": 13, "in_range": True},
        )

    def test_decode_invalid(self):
        code, _, err = _run("decode", "zz")
        self.assertEqual(code, 1)
        self.assertIn("Invalid seed code", err)


if __name__ == "__main__":
    unittest.main()
