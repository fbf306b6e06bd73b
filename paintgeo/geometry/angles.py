"""Signed angle between two rays sharing a vertex."""

from __future__ import annotations

import math

from .models import PointLike, as_point


def vector_angle(a: PointLike, b: PointLike, c: PointLike) -> float:
    """Signed angle at *b* rotating ray b→a onto ray b→c, in radians.

    Counter-clockwise is positive; the result lies in (−π, π].
    If either ray has zero length the angle is 0.0 (atan2(0, 0)),
    which carries no geometric meaning.
    """
    a, b, c = as_point(a), as_point(b), as_point(c)

    ba_x, ba_y = a.x - b.x, a.y - b.y
    bc_x, bc_y = c.x - b.x, c.y - b.y

    dot = ba_x * bc_x + ba_y * bc_y
    cross = ba_x * bc_y - ba_y * bc_x

    angle = math.atan2(cross, dot)
    # atan2(-0.0, negative) is -π; the half-open range keeps +π
    if angle == -math.pi:
        return math.pi
    return angle
