"""
Boundary vertex extraction. Corners shared by an even number of rectangles lie inside the merged region (or on a
straight stretch of its boundary) and cancel out; what remains is exactly the vertex set of the union's boundary.
"""

from collections import defaultdict
from functools import cmp_to_key
from typing import Dict, Iterable, List, Tuple
from rectmerge.models import Axis, Point, Tolerance


def unique_points(points: Iterable[Point], tolerance: Tolerance) -> List[Point]:
    """
    Cancels shared corners. Each incoming point is compared against the points kept so far: if it matches any of them
    (within tolerance), every matching point is removed; otherwise the point is kept. Note this is not a parity toggle.
    A point lying within tolerance of two kept points that are not within tolerance of each other removes both.

    Kept points are indexed by tolerance-sized grid cells, so each lookup checks only the 3x3 neighbourhood of the
    incoming point's cell. The result is in the order the points were kept.
    :param points: Rectangle corners, in rectangle order then corner order.
    :param tolerance: Shared tolerance.
    :return: Surviving boundary vertices.
    """
    kept: Dict[int, Point] = {}
    cells: Dict[Tuple[int, int], List[int]] = defaultdict(list)
    for seq, point in enumerate(points):
        cx, cy = tolerance.bucket(point.x), tolerance.bucket(point.y)
        neighbourhood = [(cx + dx, cy + dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1)]
        matches = [(cell, i) for cell in neighbourhood if cell in cells
                   for i in cells[cell] if tolerance.points_equal(kept[i], point)]
        if matches:
            for cell, i in matches:
                cells[cell].remove(i)
                if not cells[cell]:
                    del cells[cell]
                del kept[i]
        else:
            kept[seq] = point
            cells[(cx, cy)].append(seq)
    return list(kept.values())


def sort_indices(points: List[Point], primary: Axis, tolerance: Tolerance) -> List[int]:
    """
    Returns the indices of points ordered by the primary axis coordinate, then by the other coordinate. Coordinates
    within tolerance compare as equal, and ties beyond that keep their original order (the sort is stable).
    """
    secondary = primary.other

    def compare(i, j):
        p, q = points[i], points[j]
        return tolerance.compare(primary.coord(p), primary.coord(q)) or \
            tolerance.compare(secondary.coord(p), secondary.coord(q))

    return sorted(range(len(points)), key=cmp_to_key(compare))
