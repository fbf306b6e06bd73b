"""
Polygon containment and outline helpers.

A polygon is any sequence of points read as a closed loop: the last
vertex connects back to the first.  Coordinates are canvas units;
orientation follows the usual maths convention (CCW = positive area).
"""

from __future__ import annotations

import logging
from typing import Sequence

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.validation import explain_validity

from paintgeo.config import active_rules
from .angles import vector_angle
from .models import GeometryError, InvalidPointError, Point2, PointLike, as_point

log = logging.getLogger(__name__)


# ── containment ────────────────────────────────────────────────────


def winding_angle_sum(point: PointLike, polygon: Sequence[PointLike]) -> float:
    """Sum of signed angles subtended at *point* by each polygon edge.

    The wrap-around edge (last, first) is added first, then
    (v0, v1), (v1, v2), … in order.  ±2π for a point inside a simple
    polygon, ~0 for a point outside.
    """
    p = as_point(point)
    verts = [as_point(v) for v in polygon]
    if not verts:
        return 0.0

    total = vector_angle(verts[-1], p, verts[0])
    for i in range(len(verts) - 1):
        total += vector_angle(verts[i], p, verts[i + 1])
    return total


def is_point_inside_polygon(
    point: PointLike,
    polygon: Sequence[PointLike],
    threshold: float | None = None,
) -> bool:
    """Angular winding point-in-polygon test.

    Inside when ``|winding_angle_sum| > threshold`` (default
    ``GeometryRules.winding_threshold_rad``).  This is a threshold rule,
    not an exact law: points on an edge or vertex, and self-intersecting
    outlines with partial winding, classify however the sum falls.
    """
    if threshold is None:
        threshold = active_rules().winding_threshold_rad
    return abs(winding_angle_sum(point, polygon)) > threshold


# ── outline primitives ─────────────────────────────────────────────


def polygon_area(polygon: Sequence[PointLike]) -> float:
    """Signed area via shoelace formula (positive = CCW)."""
    verts = [as_point(v) for v in polygon]
    n = len(verts)
    if n < 3:
        return 0.0
    area = 0.0
    for i in range(n):
        x0, y0 = verts[i]
        x1, y1 = verts[(i + 1) % n]
        area += x0 * y1 - x1 * y0
    return area / 2.0


def ensure_ccw(polygon: Sequence[PointLike]) -> list[Point2]:
    """Return a copy with counter-clockwise winding."""
    verts = [as_point(v) for v in polygon]
    if polygon_area(verts) < 0:
        return list(reversed(verts))
    return verts


def polygon_bounds(polygon: Sequence[PointLike]) -> tuple[float, float, float, float]:
    """Return (min_x, min_y, max_x, max_y)."""
    verts = [as_point(v) for v in polygon]
    if not verts:
        raise GeometryError("Cannot take the bounds of an empty polygon")
    xs = [v.x for v in verts]
    ys = [v.y for v in verts]
    return min(xs), min(ys), max(xs), max(ys)


# ── outline validation ─────────────────────────────────────────────


def validate_polygon(polygon: Sequence[object]) -> list[str]:
    """
    Check that an outline is a proper simple polygon.

    The containment test accepts anything; callers that need its answer
    to mean something should validate first.

    Returns a list of error strings (empty = valid).
    """
    errors: list[str] = []

    verts: list[Point2] = []
    for i, raw in enumerate(polygon):
        try:
            verts.append(as_point(raw))
        except InvalidPointError as e:
            errors.append(f"Vertex {i}: {e}")
    if errors:
        log.debug("Outline rejected: %d bad vertices", len(errors))
        return errors

    if len(verts) < 3:
        errors.append(f"Outline has only {len(verts)} vertices, need at least 3.")
        return errors

    n = len(verts)
    for i in range(n):
        if verts[i] == verts[(i + 1) % n]:
            errors.append(
                f"Vertices {i} and {(i + 1) % n} coincide at "
                f"({verts[i].x:g}, {verts[i].y:g})."
            )

    # a figure-eight also sums to zero area, so check both
    if polygon_area(verts) == 0:
        errors.append("Outline has zero area.")
    shape = ShapelyPolygon([(v.x, v.y) for v in verts])
    if not shape.is_valid:
        errors.append(f"Outline is not a simple polygon: {explain_validity(shape)}.")

    if errors:
        log.debug("Outline rejected: %s", "; ".join(errors))
    return errors
