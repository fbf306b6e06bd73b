"""Geometry value types and result dataclasses."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from numbers import Real
from typing import Sequence, Union

from paintgeo.errors import GeometryError, InvalidPointError


# ── Points ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Point2:
    """An immutable (x, y) pair of finite floats.

    Equality and hashing are by value.  Unpacks like a tuple:
    ``x, y = p``.
    """

    x: float
    y: float

    def __post_init__(self):
        for name in ("x", "y"):
            val = getattr(self, name)
            if isinstance(val, bool) or not isinstance(val, Real):
                raise InvalidPointError(f"Point2.{name} must be a number, got {val!r}")
            try:
                fval = float(val)
            except OverflowError:
                raise InvalidPointError(f"Point2.{name} is out of float range") from None
            if not math.isfinite(fval):
                raise InvalidPointError(f"Point2.{name} must be finite, got {val!r}")
            object.__setattr__(self, name, fval)

    def __iter__(self):
        yield self.x
        yield self.y

    @classmethod
    def of(cls, obj: PointLike) -> Point2:
        """Coerce a Point2 or any (x, y) sequence."""
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, (str, bytes)):
            raise InvalidPointError(f"Expected an (x, y) pair, got {obj!r}")
        try:
            x, y = obj
        except (TypeError, ValueError):
            raise InvalidPointError(f"Expected an (x, y) pair, got {obj!r}") from None
        return cls(x, y)


PointLike = Union[Point2, Sequence[float]]


def as_point(obj: PointLike) -> Point2:
    return Point2.of(obj)


# ── Lines ──────────────────────────────────────────────────────────


class LineKind(Enum):
    """Orientation of the line through two points."""

    VERTICAL = "vertical"        # p.x == q.x
    HORIZONTAL = "horizontal"    # p.y == q.y
    OBLIQUE = "oblique"
    DEGENERATE = "degenerate"    # p == q, no line


class IntersectionKind(Enum):
    POINT = "point"
    PARALLEL = "parallel"        # no unique point (parallel or coincident)
    DEGENERATE = "degenerate"    # a defining pair has zero length


@dataclass(frozen=True)
class LineIntersection:
    """Outcome of intersecting two infinite lines.

    ``point`` is set only when ``kind`` is ``IntersectionKind.POINT``.
    """

    kind: IntersectionKind
    point: Point2 | None = None

    @property
    def ok(self) -> bool:
        return self.kind is IntersectionKind.POINT

    @classmethod
    def at(cls, x: float, y: float) -> LineIntersection:
        return cls(IntersectionKind.POINT, Point2(x, y))

    @classmethod
    def parallel(cls) -> LineIntersection:
        return cls(IntersectionKind.PARALLEL)

    @classmethod
    def degenerate(cls) -> LineIntersection:
        return cls(IntersectionKind.DEGENERATE)
