import argparse
import json
import logging
import random
import sys

from bentogrid.pipeline import generate_bento, bento_to_dict
from bentogrid.pipeline.config import GRID_DEFAULTS
from bentogrid.pipeline.compositor import validate_composition
from bentogrid.pipeline.geometry import (
    ContainerBounds, GridSpec, SpacingClass, GridDoesNotFitError,
)
from bentogrid.pipeline.seed import (
    InvalidSeedError, SeedSettings, apply_seed_code, decode_seed, encode_seed,
    resolve_pattern_seed, settings_in_range,
)
from bentogrid.reporting import format_summary


log = logging.getLogger("bentogrid.app")

SPACING_CHOICES = [s.name.lower() for s in SpacingClass]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bentogrid", description="Bento-style grid layouts for a rectangular container")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    g = sub.add_parser("generate", help="Lay out a bento grid and print the rectangles")
    g.add_argument("--width", type=float, required=True, help="Container width (px)")
    g.add_argument("--height", type=float, required=True, help="Container height (px)")
    g.add_argument("--x", type=float, default=0.0, help="Container left edge")
    g.add_argument("--y", type=float, default=0.0, help="Container top edge")
    g.add_argument("--rows", type=int, default=GRID_DEFAULTS.rows)
    g.add_argument("--cols", type=int, default=GRID_DEFAULTS.cols)
    g.add_argument("--margin", type=float, default=GRID_DEFAULTS.margin, help="Margin (px)")
    g.add_argument("--spacing", choices=SPACING_CHOICES,
                   default=SpacingClass.from_code(GRID_DEFAULTS.spacing_code).name.lower())
    g.add_argument("--seed", type=int, default=None, help="Pattern seed (random if omitted)")
    g.add_argument("--code", default=None, help="Import a seed code (overrides grid options)")
    g.add_argument("--summary", action="store_true", help="Print a text summary instead of JSON")

    e = sub.add_parser("encode", help="Print the seed code for a parameter set")
    e.add_argument("--rows", type=int, default=GRID_DEFAULTS.rows)
    e.add_argument("--cols", type=int, default=GRID_DEFAULTS.cols)
    e.add_argument("--margin", type=float, default=GRID_DEFAULTS.margin)
    e.add_argument("--spacing", choices=SPACING_CHOICES,
                   default=SpacingClass.from_code(GRID_DEFAULTS.spacing_code).name.lower())
    e.add_argument("--seed", type=int, required=True, help="Pattern seed")

    d = sub.add_parser("decode", help="Show the parameters stored in a seed code")
    d.add_argument("code")

    return p


def _settings_to_dict(settings: SeedSettings) -> dict:
    return {
        "rows": settings.rows,
        "cols": settings.cols,
        "spacing": settings.spacing,
        "margin": settings.margin,
        "pattern_seed": settings.pattern_seed,
        "in_range": settings_in_range(settings),
    }


def _generate(args: argparse.Namespace) -> int:
    spec = GridSpec(
        rows=args.rows,
        cols=args.cols,
        margin=args.margin,
        spacing=SpacingClass.from_name(args.spacing),
    )
    if args.code:
        try:
            spec = apply_seed_code(spec, args.code)
        except InvalidSeedError as e:
            log.warning("%s; keeping grid options", e)
        seed = resolve_pattern_seed(args.code, random.Random())
    elif args.seed is not None:
        seed = args.seed
    else:
        seed = resolve_pattern_seed(None, random.Random())

    container = ContainerBounds(width=args.width, height=args.height, origin_x=args.x, origin_y=args.y)
    grid = generate_bento(container, spec, seed)

    problems = validate_composition(grid.rectangles, container)
    for msg in problems:
        log.error("%s", msg)
    if problems:
        return 1

    if args.summary:
        print(format_summary(grid))
    else:
        print(json.dumps(bento_to_dict(grid), indent=2, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        if args.cmd == "generate":
            return _generate(args)

        if args.cmd == "encode":
            code = encode_seed(
                args.rows, args.cols, SpacingClass.from_name(args.spacing).code,
                args.margin, args.seed,
            )
            print(code)
            return 0

        if args.cmd == "decode":
            print(json.dumps(_settings_to_dict(decode_seed(args.code)), indent=2))
            return 0
    except (GridDoesNotFitError, InvalidSeedError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 2
