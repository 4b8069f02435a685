from typing import NamedTuple
from .axis import Axis
from .point import Point
from .tolerance import Tolerance, DEFAULT_TOLERANCE


class Edge(NamedTuple):
    """Axis-aligned boundary segment between two vertices."""
    start: Point
    end: Point

    def is_along(self, axis: Axis, tolerance: Tolerance = DEFAULT_TOLERANCE) -> bool:
        """
        Returns True if the edge runs parallel to the given axis, i.e. its endpoints share the other axis' coordinate
        within the given tolerance.
        """
        other = axis.other
        return tolerance.equal(other.coord(self.start), other.coord(self.end))

    @property
    def is_horizontal(self) -> bool:
        """Parallel to the X axis, using the default tolerance. Use is_along() for a merger's own tolerance."""
        return self.is_along(Axis.X)

    @property
    def is_vertical(self) -> bool:
        return self.is_along(Axis.Y)

    def length(self) -> float:
        return abs(self.end.x - self.start.x) + abs(self.end.y - self.start.y)
