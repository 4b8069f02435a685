from .tolerance import Tolerance, EPSILON, DEFAULT_TOLERANCE
from .axis import Axis
from .point import Point
from .rect import Rect, RectLike, to_rect, union, union_all
from .edge import Edge
from .polygon import Polygon, Orientation, polygon_edges, signed_area, orientation
