"""JSON conversion for points, polygons and intersection results."""

from __future__ import annotations

from .models import InvalidPointError, LineIntersection, Point2


def point_to_dict(p: Point2) -> dict:
    return {"x": p.x, "y": p.y}


def parse_point(data: object) -> Point2:
    """Parse ``{"x": .., "y": ..}``, ``[x, y]`` or ``"x,y"``."""
    if isinstance(data, Point2):
        return data
    if isinstance(data, dict):
        missing = [k for k in ("x", "y") if k not in data]
        if missing:
            raise InvalidPointError(f"Point is missing {', '.join(missing)}: {data!r}")
        return Point2(data["x"], data["y"])
    if isinstance(data, str):
        parts = data.split(",")
        if len(parts) != 2:
            raise InvalidPointError(f"Expected 'x,y', got {data!r}")
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            raise InvalidPointError(f"Expected 'x,y', got {data!r}") from None
        return Point2(x, y)
    return Point2.of(data)


def parse_polygon(data: object) -> list[Point2]:
    """Parse a vertex list, or a ``{"vertices": [...]}`` object."""
    if isinstance(data, dict):
        if "vertices" not in data:
            raise InvalidPointError("Polygon object has no 'vertices' key")
        data = data["vertices"]
    if isinstance(data, (str, bytes)) or not isinstance(data, (list, tuple)):
        raise InvalidPointError(f"Expected a list of vertices, got {type(data).__name__}")
    return [parse_point(v) for v in data]


def polygon_to_dict(polygon: list[Point2]) -> dict:
    return {"vertices": [point_to_dict(p) for p in polygon]}


def intersection_to_dict(result: LineIntersection) -> dict:
    """Serialize a LineIntersection to a JSON-safe dict."""
    return {
        "kind": result.kind.value,
        "point": point_to_dict(result.point) if result.point is not None else None,
    }
