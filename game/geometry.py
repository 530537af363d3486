"""2D vector helpers shared by the simulation."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point (or vector) on the play field."""
    x: float
    y: float

    def __add__(self, other: 'Position') -> 'Position':
        return Position(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Position') -> 'Position':
        return Position(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> 'Position':
        return Position(self.x * factor, self.y * factor)

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def dot(self, other: 'Position') -> float:
        return self.x * other.x + self.y * other.y


def distance(a: Position, b: Position) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a.x - b.x, a.y - b.y)


def direction(vector: Position) -> Position:
    """Unit vector pointing along `vector`; the zero vector stays zero."""
    length = vector.length()
    if length == 0:
        return Position(0.0, 0.0)
    return Position(vector.x / length, vector.y / length)
