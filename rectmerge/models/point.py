from typing import Tuple
from .tolerance import DEFAULT_TOLERANCE


class Point:
    """
    Immutable 2D point. Equality is approximate and always uses DEFAULT_TOLERANCE; code working with a different
    epsilon compares points with Tolerance.points_equal instead.
    """

    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float):
        self._x = x
        self._y = y

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def __eq__(self, other):
        if isinstance(other, Point):
            return DEFAULT_TOLERANCE.points_equal(self, other)
        return False

    __hash__ = None

    def __repr__(self):
        return f'Point({self.x}, {self.y})'

    def cmp_key(self) -> Tuple[float, float]:
        return self.x, self.y
