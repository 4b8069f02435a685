import math
from typing import List, Union, Tuple, Iterable
from .point import Point
from .tolerance import Tolerance, DEFAULT_TOLERANCE
from ..exceptions import InvalidGeometry


class Rect:
    def __init__(self, min_x: float, min_y: float, max_x: float, max_y: float):
        self.min_x = min_x
        self.min_y = min_y
        self.max_x = max_x
        self.max_y = max_y

    def __eq__(self, other):
        if isinstance(other, Rect):
            return self.min_x == other.min_x\
                   and self.min_y == other.min_y\
                   and self.max_x == other.max_x\
                   and self.max_y == other.max_y
        return False

    def __repr__(self):
        return f'Rect({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})'

    def union(self, rect: 'Rect') -> 'Rect':
        return Rect(
            min_x=min(self.min_x, rect.min_x),
            min_y=min(self.min_y, rect.min_y),
            max_x=max(self.max_x, rect.max_x),
            max_y=max(self.max_y, rect.max_y)
        )

    @property
    def width(self):
        return self.max_x - self.min_x

    @property
    def height(self):
        return self.max_y - self.min_y

    def area(self) -> float:
        return self.width * self.height

    def corners(self) -> List[Point]:
        """
        Returns the four corners in bottom-left, bottom-right, top-right, top-left order, so that every rectangle
        contributes two points sharing each of its x and y coordinates.
        """
        return [
            Point(self.min_x, self.min_y),
            Point(self.max_x, self.min_y),
            Point(self.max_x, self.max_y),
            Point(self.min_x, self.max_y)
        ]

    def validate(self, tolerance: Tolerance = DEFAULT_TOLERANCE) -> 'Rect':
        """
        Ensures the rectangle can take part in a merge. Rectangles with min > max on an axis are rejected, and so are
        degenerate rectangles whose width or height is zero within tolerance (these would contribute coincident corner
        pairs that cancel each other out and leave dangling vertices behind).
        :raises InvalidGeometry: if a coordinate is NaN or infinite, or the rectangle is inverted or degenerate.
        """
        if not all(math.isfinite(v) for v in (self.min_x, self.min_y, self.max_x, self.max_y)):
            raise InvalidGeometry(self, 'non-finite coordinate')
        if self.min_x > self.max_x:
            raise InvalidGeometry(self, 'min_x is greater than max_x')
        if self.min_y > self.max_y:
            raise InvalidGeometry(self, 'min_y is greater than max_y')
        if tolerance.equal(self.min_x, self.max_x):
            raise InvalidGeometry(self, 'zero width')
        if tolerance.equal(self.min_y, self.max_y):
            raise InvalidGeometry(self, 'zero height')
        return self


RectLike = Union[
    Rect,
    Tuple[float, float, float, float],
    List[float]
]


def to_rect(value: RectLike) -> Rect:
    if isinstance(value, Rect):
        return value
    if isinstance(value, (list, tuple)):
        if len(value) == 4:
            return Rect(value[0], value[1], value[2], value[3])
        raise TypeError(f"Invalid number of coordinates in rectangle: {len(value)}. Rectangle must have 4 coordinates "
                        f"(min_x, min_y, max_x, max_y).")
    raise TypeError(f"Invalid rectangle type: {type(value)}. Rectangle must either be a Rect, list or tuple.")


def union(rect1: Rect, rect2: Rect) -> Rect:
    if rect1 is None:
        return rect2
    if rect2 is None:
        return rect1
    return rect1.union(rect2)


def union_all(rects: Iterable[Rect]) -> Rect:
    result = None
    for rect in rects:
        result = union(result, rect)
    return result
