"""
Helpers for boundary loops. A polygon is a plain list of points in walk order; the last point implicitly connects back
to the first, so the closing vertex is never repeated.
"""

from enum import Enum
from typing import List
from .edge import Edge
from .point import Point

Polygon = List[Point]


class Orientation(Enum):
    CLOCKWISE = 0
    COUNTERCLOCKWISE = 1
    UNDEFINED = 2


def polygon_edges(polygon: Polygon) -> List[Edge]:
    n = len(polygon)
    return [Edge(polygon[i], polygon[(i + 1) % n]) for i in range(n)]


def signed_area(polygon: Polygon) -> float:
    """Shoelace area; positive for counterclockwise loops."""
    n = len(polygon)
    total = 0.0
    for i in range(n):
        p, q = polygon[i], polygon[(i + 1) % n]
        total += p.x * q.y - q.x * p.y
    return total / 2


def orientation(polygon: Polygon) -> Orientation:
    area = signed_area(polygon)
    if area > 0:
        return Orientation.COUNTERCLOCKWISE
    elif area < 0:
        return Orientation.CLOCKWISE
    else:
        return Orientation.UNDEFINED
