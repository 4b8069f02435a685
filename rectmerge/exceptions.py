from typing import List, Sequence


class RectMergeError(Exception):
    """Base class for errors raised while merging rectangles."""


class InvalidGeometry(RectMergeError):
    """A rectangle has min > max on some axis, or zero width/height."""

    def __init__(self, rect, reason: str):
        self.rect = rect
        self.reason = reason
        super().__init__(f'Invalid rectangle {rect!r}: {reason}')


class UnclosedBoundary(RectMergeError):
    """
    A run of boundary vertices sharing one coordinate has an odd number of points, so the points cannot be paired into
    edges. This happens when the rectangles do not form a closed rectilinear boundary.
    """

    def __init__(self, axis, points: Sequence):
        self.axis = axis
        self.points = list(points)
        super().__init__(f'Odd number of boundary vertices ({len(self.points)}) sharing the same '
                         f'{axis.name.lower()} coordinate: {self.points}')


class InconsistentEdgeSet(RectMergeError):
    """Polygon assembly could not find the next edge of a loop."""

    def __init__(self, orientation: str, polygon: List):
        self.orientation = orientation
        self.polygon = list(polygon)
        super().__init__(f'No {orientation} edge left at {self.polygon[-1]!r} while walking loop {self.polygon}')


class RectFormatError(ValueError):
    """A line of rectangle input could not be parsed."""

    def __init__(self, line_no: int, line: str, reason: str):
        self.line_no = line_no
        self.line = line
        super().__init__(f'Line {line_no}: {reason}: {line!r}')
