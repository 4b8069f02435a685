import math

EPSILON = 1e-5


class Tolerance:
    """
    Approximate comparison of coordinates. A single instance is shared by every stage of a merge (vertex cancellation,
    sorting, edge pairing and polygon closure) so that all stages agree on which coordinates are the same.
    """

    def __init__(self, epsilon: float = EPSILON):
        if epsilon <= 0:
            raise ValueError(f'Tolerance must be positive, got {epsilon}')
        self.epsilon = epsilon

    def __repr__(self):
        return f'Tolerance({self.epsilon})'

    def equal(self, a: float, b: float) -> bool:
        return abs(a - b) <= self.epsilon

    def compare(self, a: float, b: float) -> int:
        if self.equal(a, b):
            return 0
        return -1 if a < b else 1

    def points_equal(self, p, q) -> bool:
        return self.equal(p.x, q.x) and self.equal(p.y, q.y)

    def bucket(self, value: float) -> int:
        """
        Returns the grid cell (of width epsilon) containing the value. Two values within tolerance of each other always
        fall in the same or in adjacent cells.
        """
        return math.floor(value / self.epsilon)


DEFAULT_TOLERANCE = Tolerance()
