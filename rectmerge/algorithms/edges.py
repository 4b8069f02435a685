"""
Edge resolution. In an ordering sorted by y (then x), the boundary vertices sharing one y coordinate alternate between
entering and leaving the merged region, so pairing them in order (1st with 2nd, 3rd with 4th, ...) gives the horizontal
edges on that line. The same holds for the x-sorted ordering and vertical edges.
"""

from typing import Iterator, List, Tuple
from rectmerge.exceptions import UnclosedBoundary
from rectmerge.models import Axis, Edge, Point, Tolerance

# Marks a vertex with no (remaining) edge in an adjacency array.
CONSUMED = -1

IndexPair = Tuple[int, int]


def iter_runs(points: List[Point], order: List[int], axis: Axis, tolerance: Tolerance) -> Iterator[List[int]]:
    """Yields groups of consecutive indices in order whose axis coordinate matches the first index of the group."""
    i = 0
    count = len(order)
    while i < count:
        value = axis.coord(points[order[i]])
        run = []
        while i < count and tolerance.equal(axis.coord(points[order[i]]), value):
            run.append(order[i])
            i += 1
        yield run


def resolve_pairs(points: List[Point], order: List[int], axis: Axis, tolerance: Tolerance) -> List[IndexPair]:
    """
    Pairs up the vertices of each run sharing the axis coordinate.
    :param points: Boundary vertices.
    :param order: Vertex indices sorted with axis as the primary key.
    :param axis: Shared coordinate. Axis.Y yields horizontal edges, Axis.X yields vertical edges.
    :param tolerance: Shared tolerance.
    :raises UnclosedBoundary: if a run has an odd number of vertices.
    """
    pairs = []
    for run in iter_runs(points, order, axis, tolerance):
        if len(run) % 2 != 0:
            raise UnclosedBoundary(axis, [points[i] for i in run])
        pairs.extend(zip(run[0::2], run[1::2]))
    return pairs


def resolve_edges(points: List[Point], order_x: List[int], order_y: List[int], tolerance: Tolerance) -> List[Edge]:
    """Resolves all boundary edges into a single list: horizontal edges first, then vertical edges."""
    horizontal = resolve_pairs(points, order_y, Axis.Y, tolerance)
    vertical = resolve_pairs(points, order_x, Axis.X, tolerance)
    return [Edge(points[a], points[b]) for a, b in horizontal + vertical]


def resolve_edge_maps(points: List[Point], order_x: List[int], order_y: List[int],
                      tolerance: Tolerance) -> Tuple[List[int], List[int]]:
    """
    Resolves boundary edges into two adjacency arrays indexed by vertex: horizontal[i] is the vertex at the other end of
    the horizontal edge through vertex i, and likewise for vertical. Both arrays are self-inverse.
    """
    horizontal = _to_adjacency(len(points), resolve_pairs(points, order_y, Axis.Y, tolerance))
    vertical = _to_adjacency(len(points), resolve_pairs(points, order_x, Axis.X, tolerance))
    return horizontal, vertical


def _to_adjacency(size: int, pairs: List[IndexPair]) -> List[int]:
    adjacency = [CONSUMED] * size
    for a, b in pairs:
        adjacency[a] = b
        adjacency[b] = a
    return adjacency
