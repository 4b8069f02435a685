"""
Merges axis-aligned rectangles into the boundary of their union, either as a flat list of edges (for drawing) or as
closed polygon loops. The approach works on corner points alone: shared corners cancel, the surviving vertices are
sorted along both axes, and consecutive vertices on the same line are paired into edges.

See https://stackoverflow.com/questions/13746284/merging-multiple-adjacent-rectangles-into-one-polygon
"""

import logging
from typing import Iterable, List, Tuple
from rectmerge.models import Axis, Edge, Point, Polygon, Rect, RectLike, Tolerance, EPSILON, to_rect
from rectmerge.algorithms import unique_points, sort_indices, resolve_edges, resolve_edge_maps, assemble_polygons

logger = logging.getLogger(__name__)


class RectMerger:
    """
    Rectangle merger bound to a coordinate tolerance. The same tolerance is used for every stage of the merge. Each
    call is independent: no state is kept between calls, so one instance may be shared freely.
    """

    def __init__(self, epsilon: float = EPSILON):
        """
        Initializes the merger
        :param epsilon: Coordinates closer than this are considered equal. Defaults to EPSILON.
        """
        self.tolerance = Tolerance(epsilon)

    def __repr__(self):
        return f'RectMerger(epsilon={self.tolerance.epsilon})'

    def validate_rects(self, rects: Iterable[RectLike]) -> List[Rect]:
        """
        Converts and validates the input rectangles.
        :raises TypeError: if an item is not a Rect or a 4-tuple/list of coordinates.
        :raises InvalidGeometry: if a rectangle is inverted or has zero width/height.
        """
        return [to_rect(r).validate(self.tolerance) for r in rects]

    def boundary_vertices(self, rects: Iterable[RectLike]) -> List[Point]:
        """Returns the vertices of the union's boundary, in no particular order."""
        corners = [p for r in self.validate_rects(rects) for p in r.corners()]
        vertices = unique_points(corners, self.tolerance)
        logger.debug('%d corners reduced to %d boundary vertices', len(corners), len(vertices))
        return vertices

    def merge_edges(self, rects: Iterable[RectLike]) -> List[Edge]:
        """
        Returns the boundary edges of the union of the rectangles: all horizontal edges, then all vertical edges.
        :raises InvalidGeometry: if a rectangle is inverted or degenerate.
        :raises UnclosedBoundary: if the vertices cannot be paired into a closed boundary.
        """
        vertices, order_x, order_y = self._sorted_vertices(rects)
        edges = resolve_edges(vertices, order_x, order_y, self.tolerance)
        logger.info('Merged into %d edges', len(edges))
        return edges

    def merge_polygons(self, rects: Iterable[RectLike]) -> List[Polygon]:
        """
        Returns the boundary loops of the union of the rectangles. Each loop is a list of vertices alternating
        horizontal and vertical edges, without a repeated closing vertex. Winding order is not normalized.
        :raises InvalidGeometry: if a rectangle is inverted or degenerate.
        :raises UnclosedBoundary: if the vertices cannot be paired into a closed boundary.
        :raises InconsistentEdgeSet: if the edges do not form closed loops.
        """
        vertices, order_x, order_y = self._sorted_vertices(rects)
        horizontal, vertical = resolve_edge_maps(vertices, order_x, order_y, self.tolerance)
        loops = assemble_polygons(horizontal, vertical)
        polygons = [[vertices[i] for i in loop] for loop in loops]
        logger.info('Merged into %d polygons', len(polygons))
        for polygon in polygons:
            logger.debug('Polygon: %s', polygon)
        return polygons

    def _sorted_vertices(self, rects: Iterable[RectLike]) -> Tuple[List[Point], List[int], List[int]]:
        vertices = self.boundary_vertices(rects)
        return vertices, sort_indices(vertices, Axis.X, self.tolerance), sort_indices(vertices, Axis.Y, self.tolerance)


def merge_edges(rects: Iterable[RectLike], epsilon: float = EPSILON) -> List[Edge]:
    """Convenience wrapper for RectMerger(epsilon).merge_edges(rects)."""
    return RectMerger(epsilon).merge_edges(rects)


def merge_polygons(rects: Iterable[RectLike], epsilon: float = EPSILON) -> List[Polygon]:
    """Convenience wrapper for RectMerger(epsilon).merge_polygons(rects)."""
    return RectMerger(epsilon).merge_polygons(rects)
