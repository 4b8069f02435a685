from enum import Enum


class Axis(Enum):
    X = 0
    Y = 1

    def coord(self, point) -> float:
        return point.x if self is Axis.X else point.y

    @property
    def other(self) -> 'Axis':
        return Axis.Y if self is Axis.X else Axis.X
