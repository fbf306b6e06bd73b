"""
Intersection of two infinite lines, each given by two points.

The result is not clipped to the defining segments; it may lie
anywhere on either line.  Lines are parametrised by their inverse
slope (Δx/Δy) so vertical lines never divide by zero:

    lam = (a.x - b.x) / (a.y - b.y)     line ab
    gam = (c.x - d.x) / (c.y - d.y)     line cd

``intersect_lines`` classifies each line first and picks exactly one
formula for the pair.  ``legacy_intersection`` keeps the older
single-precision behaviour, where undefined cases come back as
NaN / ±inf instead of a tagged result.
"""

from __future__ import annotations

import logging
import math

import numpy as np

from paintgeo.config import GeometryRules, active_rules
from .models import IntersectionKind, LineIntersection, LineKind, PointLike, Point2, as_point

log = logging.getLogger(__name__)


def classify_line(p: PointLike, q: PointLike) -> LineKind:
    """Orientation of the line through *p* and *q*."""
    p, q = as_point(p), as_point(q)
    if p == q:
        return LineKind.DEGENERATE
    if p.x == q.x:
        return LineKind.VERTICAL
    if p.y == q.y:
        return LineKind.HORIZONTAL
    return LineKind.OBLIQUE


def _inverse_slope(p: Point2, q: Point2) -> float:
    return (p.x - q.x) / (p.y - q.y)


def intersect_lines(
    a: PointLike, b: PointLike,
    c: PointLike, d: PointLike,
    rules: GeometryRules | None = None,
) -> LineIntersection:
    """Intersection point of line ab with line cd.

    Returns a ``LineIntersection`` tagged POINT, PARALLEL (no unique
    point, including coincident lines) or DEGENERATE (a == b or c == d).
    Never raises for finite input.
    """
    a, b, c, d = as_point(a), as_point(b), as_point(c), as_point(d)
    if rules is None:
        rules = active_rules()

    ab = classify_line(a, b)
    cd = classify_line(c, d)

    if ab is LineKind.DEGENERATE or cd is LineKind.DEGENERATE:
        log.debug("Degenerate line pair: ab=%s cd=%s", ab.value, cd.value)
        return LineIntersection.degenerate()

    if ab is cd and ab is not LineKind.OBLIQUE:
        log.debug("Axis-aligned lines are parallel: both %s", ab.value)
        return LineIntersection.parallel()

    if (ab, cd) == (LineKind.VERTICAL, LineKind.HORIZONTAL):
        x, y = a.x, c.y
    elif (ab, cd) == (LineKind.HORIZONTAL, LineKind.VERTICAL):
        x, y = d.x, a.y
    elif ab is LineKind.VERTICAL:
        # slope of cd taken directly; gam can underflow to 0.0
        x = a.x
        y = (x - c.x) * (c.y - d.y) / (c.x - d.x) + c.y
    elif ab is LineKind.HORIZONTAL:
        gam = _inverse_slope(c, d)
        y = a.y
        x = (y - c.y) * gam + c.x
    elif cd is LineKind.VERTICAL:
        x = d.x
        y = (x - a.x) * (a.y - b.y) / (a.x - b.x) + a.y
    elif cd is LineKind.HORIZONTAL:
        lam = _inverse_slope(a, b)
        y = c.y
        x = (y - a.y) * lam + a.x
    else:
        lam = _inverse_slope(a, b)
        gam = _inverse_slope(c, d)
        if abs(lam - gam) <= rules.parallel_tolerance:
            log.debug("Oblique lines are parallel: lam=%r gam=%r", lam, gam)
            return LineIntersection.parallel()
        y = (a.y * lam - c.y * gam - a.x + c.x) / (lam - gam)
        x = (y - a.y) * lam + a.x

    if not (math.isfinite(x) and math.isfinite(y)):
        log.debug("Intersection overflowed to (%r, %r), treating as parallel", x, y)
        return LineIntersection.parallel()
    return LineIntersection.at(x, y)


def legacy_intersection(
    a: PointLike, b: PointLike,
    c: PointLike, d: PointLike,
) -> tuple[float, float]:
    """Single-precision intersection with the historical branch order.

    The four axis-aligned cases are independent checks evaluated in
    order, so when two apply the later one wins.  The general formula
    runs only when neither line is axis-aligned.  Division by zero is
    not trapped: parallel or degenerate input returns NaN or ±inf.
    """
    a, b, c, d = as_point(a), as_point(b), as_point(c), as_point(d)
    f32 = np.float32

    x = y = f32(0.0)
    with np.errstate(all="ignore"):
        # coordinates beyond float32 range become ±inf here
        ax, ay, bx, by = f32(a.x), f32(a.y), f32(b.x), f32(b.y)
        cx, cy, dx, dy = f32(c.x), f32(c.y), f32(d.x), f32(d.y)

        lam = (ax - bx) / (ay - by)
        gam = (cx - dx) / (cy - dy)

        if ax == bx:
            x = ax
            y = (x - cx) / gam + cy

        if ay == by:
            y = ay
            x = (y - cy) * gam + cx

        if cx == dx:
            x = dx
            y = (x - ax) / lam + ay

        if cy == dy:
            y = cy
            x = (y - ay) * lam + ax

        if ax != bx and ay != by and cx != dx and cy != dy:
            y = (ay * lam - cy * gam - ax + cx) / (lam - gam)
            x = (y - ay) * lam + ax

    result = (float(x), float(y))
    if not (math.isfinite(result[0]) and math.isfinite(result[1])):
        log.debug("Legacy intersection is non-finite: %r", result)
    return result
