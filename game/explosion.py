"""Explosions that grow and shrink over a fixed lifetime."""

from .geometry import Position, distance


def explosion_size(age: float) -> float:
    """
    Triangular easing for explosion size.

    Ramps linearly from 0 to 1 over the first half of the lifetime and back
    to 0 over the second half.
    """
    if age <= 0.5:
        return max(0.0, age * 2.0)
    return max(0.0, (1.0 - age) * 2.0)


class Explosion:
    """A destructive field created where a missile detonates."""

    def __init__(self, position: Position, max_radius: float):
        self.position = position
        self.max_radius = max_radius
        self.age = 0.0
        self.radius = 0.0

    def update(self, age_step: float):
        """Age the explosion by one frame and recompute its radius."""
        self.age += age_step
        self.radius = explosion_size(self.age) * self.max_radius

    @property
    def expired(self) -> bool:
        return self.age > 1.0

    def contains(self, point: Position) -> bool:
        """Check if a point lies strictly inside the explosion radius."""
        return distance(point, self.position) < self.radius

    def __repr__(self):
        return (f"Explosion(pos=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"age={self.age:.2f}, radius={self.radius:.1f})")


def inside_any(point: Position, explosions) -> bool:
    """Check if a point is inside any of the given explosions."""
    return any(explosion.contains(point) for explosion in explosions)
