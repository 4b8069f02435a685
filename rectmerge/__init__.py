from rectmerge.models import (
    Point, Rect, Edge, Polygon, Axis, Orientation, Tolerance, EPSILON, to_rect, polygon_edges, signed_area, orientation)
from .exceptions import RectMergeError, InvalidGeometry, UnclosedBoundary, InconsistentEdgeSet, RectFormatError
from .merger import RectMerger, merge_edges, merge_polygons
