"""Geometry core — angles, polygon containment, line intersection.

Submodules:
  models         Point2 value type, line/intersection tags, errors.
  angles         Signed angle at a shared vertex.
  polygon        Winding-angle containment plus outline helpers.
  lines          Infinite line/line intersection (tagged + legacy).
  serialization  JSON conversion (point_to_dict, parse_polygon, …).
"""

from .models import (
    GeometryError, InvalidPointError,
    Point2, PointLike, as_point,
    LineKind, IntersectionKind, LineIntersection,
)
from .angles import vector_angle
from .polygon import (
    winding_angle_sum,
    is_point_inside_polygon,
    polygon_area,
    ensure_ccw,
    polygon_bounds,
    validate_polygon,
)
from .lines import classify_line, intersect_lines, legacy_intersection
from .serialization import (
    point_to_dict, parse_point,
    parse_polygon, polygon_to_dict,
    intersection_to_dict,
)

__all__ = [
    # Models
    "GeometryError", "InvalidPointError",
    "Point2", "PointLike", "as_point",
    "LineKind", "IntersectionKind", "LineIntersection",
    # Angles
    "vector_angle",
    # Polygon
    "winding_angle_sum", "is_point_inside_polygon",
    "polygon_area", "ensure_ccw", "polygon_bounds", "validate_polygon",
    # Lines
    "classify_line", "intersect_lines", "legacy_intersection",
    # Serialization
    "point_to_dict", "parse_point", "parse_polygon", "polygon_to_dict",
    "intersection_to_dict",
]
