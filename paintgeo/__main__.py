"""
paintgeo — command-line front end.

Usage:
    python -m paintgeo angle 1,0 0,0 0,1
    python -m paintgeo inside 5,5 --vertices "0,0 10,0 10,10 0,10"
    python -m paintgeo inside 5,5 --polygon shape.json
    python -m paintgeo intersect 5,0 5,10 0,3 10,3 [--legacy]
    python -m paintgeo validate --polygon shape.json

Points are written "x,y".  Put "--" before the points when one has a
negative x, so it is not read as an option:

    python -m paintgeo angle -- -1,0 0,0 0,1

Results are printed as JSON.
"""

from __future__ import annotations

import argparse
import json
import logging
import math
import sys
from pathlib import Path

from paintgeo import config
from paintgeo.geometry import (
    GeometryError,
    intersect_lines,
    intersection_to_dict,
    is_point_inside_polygon,
    legacy_intersection,
    parse_point,
    parse_polygon,
    validate_polygon,
    vector_angle,
    winding_angle_sum,
)

log = logging.getLogger("paintgeo.cli")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="paintgeo", description="2D geometry core for the drawing canvas")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--config", default=None, help="Path to a JSON rules override")
    sub = p.add_subparsers(dest="cmd", required=True)

    a = sub.add_parser("angle", help="Signed angle at B from ray BA to ray BC")
    a.add_argument("a", help="Point on the first ray (x,y)")
    a.add_argument("b", help="Shared vertex (x,y)")
    a.add_argument("c", help="Point on the second ray (x,y)")

    ins = sub.add_parser("inside", help="Winding-angle point-in-polygon test")
    ins.add_argument("point", help="Point to test (x,y)")
    _add_polygon_source(ins)
    ins.add_argument("--threshold", type=float, default=None,
                     help="Override the winding threshold (radians)")

    x = sub.add_parser("intersect", help="Intersection of infinite lines AB and CD")
    for name in ("a", "b", "c", "d"):
        x.add_argument(name, help=f"Point {name.upper()} (x,y)")
    x.add_argument("--legacy", action="store_true",
                   help="Single-precision legacy result (may print NaN/Infinity)")

    v = sub.add_parser("validate", help="Check that an outline is a simple polygon")
    _add_polygon_source(v)

    return p


def _add_polygon_source(parser: argparse.ArgumentParser) -> None:
    src = parser.add_mutually_exclusive_group(required=True)
    src.add_argument("--vertices", help='Space-separated vertices, e.g. "0,0 10,0 10,10"')
    src.add_argument("--polygon", help="Path to a JSON vertex list or {\"vertices\": [...]}")


def _read_polygon(args: argparse.Namespace) -> list:
    if args.vertices is not None:
        return [parse_point(tok) for tok in args.vertices.split()]
    path = Path(args.polygon)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise GeometryError(f"Cannot read polygon file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise GeometryError(f"Polygon file {path} is not valid JSON: {e}") from e
    return parse_polygon(data)


def _emit(payload: dict) -> None:
    print(json.dumps(payload))


def run(args: argparse.Namespace) -> int:
    if args.cmd == "angle":
        rad = vector_angle(parse_point(args.a), parse_point(args.b), parse_point(args.c))
        _emit({"angle_rad": rad, "angle_deg": math.degrees(rad)})
        return 0

    if args.cmd == "inside":
        point = parse_point(args.point)
        polygon = _read_polygon(args)
        _emit({
            "inside": is_point_inside_polygon(point, polygon, threshold=args.threshold),
            "winding_angle": winding_angle_sum(point, polygon),
        })
        return 0

    if args.cmd == "intersect":
        pts = [parse_point(getattr(args, n)) for n in ("a", "b", "c", "d")]
        if args.legacy:
            lx, ly = legacy_intersection(*pts)
            _emit({"x": lx, "y": ly})
        else:
            _emit(intersection_to_dict(intersect_lines(*pts)))
        return 0

    # validate; the parser allows no other command
    errors = validate_polygon(_read_polygon(args))
    _emit({"valid": not errors, "errors": errors})
    return 1 if errors else 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.config:
            config.use_rules(config.load_rules(args.config))
        return run(args)
    except GeometryError as e:
        log.error("%s", e)
        return 2


if __name__ == "__main__":
    sys.exit(main())
