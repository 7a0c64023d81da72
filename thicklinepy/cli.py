"""Command line entry point: ``thickline AX,AY BX,BY [options]``."""

import argparse
import json
import logging
import re
import sys
from typing import List, Optional, Tuple

from .app import ThickLineCommand
from .constants import FEATURE_TYPES
from .sketch2d import MemorySketch2D, draw_shapes

logger = logging.getLogger(__name__)

_NUMBER = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
_POINT_RE = re.compile(rf"^\s*{_NUMBER}\s*,\s*{_NUMBER}\s*$")

# option dest -> ThickLineSettings field
_OVERRIDES = {
    "width": "width",
    "lead_a": "lead_a",
    "lead_b": "lead_b",
    "feature_a": "feature_a_type",
    "feature_a_width": "feature_a_width",
    "feature_a_length": "feature_a_length",
    "feature_b": "feature_b_type",
    "feature_b_width": "feature_b_width",
    "feature_b_length": "feature_b_length",
}


def parse_point(text: str) -> Tuple[float, float]:
    try:
        x, y = (float(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a point as 'x,y', got '{text}'")
    return x, y


def _points_last(argv: List[str]) -> List[str]:
    """
    Move the point arguments behind a ``--`` separator.

    argparse takes ``-1,0`` for an option because its negative number
    pattern has no comma. Points keep their relative order.
    """
    if "--" in argv:
        return list(argv)
    points = [arg for arg in argv if _POINT_RE.match(arg)]
    rest = [arg for arg in argv if not _POINT_RE.match(arg)]
    return rest + ["--"] + points


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="thickline",
        description="Build a thick line with optional Arrow/T end features",
    )
    parser.add_argument("a", type=parse_point, help="Start point A as 'x,y'")
    parser.add_argument("b", type=parse_point, help="End point B as 'x,y'")
    parser.add_argument("--width", type=float, help="Line width")
    for end in ("a", "b"):
        upper = end.upper()
        parser.add_argument(f"--lead-{end}", type=float, help=f"Lead-in beyond point {upper}")
        parser.add_argument(
            f"--feature-{end}", choices=FEATURE_TYPES, help=f"Feature at end {upper}"
        )
        parser.add_argument(f"--feature-{end}-width", type=float, help=f"Feature {upper} width")
        parser.add_argument(f"--feature-{end}-length", type=float, help=f"Feature {upper} length")
    parser.add_argument(
        "--settings",
        default=None,
        help="Settings file (default: per-user settings.ini)",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Remember the options as defaults for the next run",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--png", default=None, help="Render the shapes to a PNG file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_points_last(argv))

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    overrides = {
        field: getattr(args, dest)
        for dest, field in _OVERRIDES.items()
        if getattr(args, dest) is not None
    }

    sketch = MemorySketch2D()
    command = ThickLineCommand(sketch, settings_file=args.settings)
    if args.save:
        result = command.execute(args.a, args.b, **overrides)
    else:
        result = command.preview(args.a, args.b, **overrides)

    if args.json:
        print(json.dumps(result.to_json(), indent=2))
    elif result.ok:
        for name, polygon in (
            ("body", result.shapes.body),
            ("end_a", result.shapes.end_a),
            ("end_b", result.shapes.end_b),
        ):
            if polygon is None:
                continue
            points = " ".join(f"({x:g},{y:g})" for x, y in polygon.to_tuples())
            print(f"{name} {polygon.kind}: {points}")

    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return 1

    if args.png:
        if not sketch.primitives:
            draw_shapes(sketch, result.shapes)
        sketch.to_png(args.png)
        logger.info("Rendered %s", args.png)
    return 0


if __name__ == "__main__":
    sys.exit(main())
