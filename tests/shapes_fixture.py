"""Canvas shape fixtures shared by the geometry tests.

  square     — 10 × 10, CCW, corner at the origin
  square_cw  — the same square wound clockwise
  l_shape    — concave L: 20 × 20 with the top-right 10 × 10 removed
  hexagon    — regular, radius 8, centred on (50, 50)
  bowtie     — figure-eight, self-intersecting at (5, 5)
"""

from __future__ import annotations

import math

from paintgeo.geometry import Point2


def square() -> list[Point2]:
    return [Point2(0, 0), Point2(10, 0), Point2(10, 10), Point2(0, 10)]


def square_cw() -> list[Point2]:
    return list(reversed(square()))


def l_shape() -> list[Point2]:
    return [
        Point2(0, 0), Point2(20, 0), Point2(20, 10),
        Point2(10, 10), Point2(10, 20), Point2(0, 20),
    ]


def hexagon(cx: float = 50.0, cy: float = 50.0, r: float = 8.0) -> list[Point2]:
    return [
        Point2(cx + r * math.cos(math.pi / 3 * i), cy + r * math.sin(math.pi / 3 * i))
        for i in range(6)
    ]


def bowtie() -> list[Point2]:
    return [Point2(0, 0), Point2(10, 10), Point2(10, 0), Point2(0, 10)]
