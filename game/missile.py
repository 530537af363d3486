"""Missiles flying across the play field, both player and enemy."""

from .geometry import Position, direction, distance


class MissileCategory:
    """Enumeration of missile owners."""
    PLAYER = 'player'
    ENEMY = 'enemy'


class Missile:
    """A constant-velocity projectile travelling from a launch point to a target."""

    def __init__(self, launch_point: Position, target_point: Position,
                 speed: float, category: str = MissileCategory.PLAYER):
        """
        Initialize a missile at its launch point.

        Args:
            launch_point: Where the missile starts
            target_point: Where the missile detonates
            speed: Distance travelled per frame
            category: MissileCategory.PLAYER or MissileCategory.ENEMY
        """
        self.launch_point = launch_point
        self.target_point = target_point
        self.position = launch_point
        self.category = category

        # Velocity is fixed at launch
        self.velocity = direction(target_point - launch_point).scale(speed)

    @property
    def is_enemy(self) -> bool:
        return self.category == MissileCategory.ENEMY

    def update(self):
        """Advance the missile by one frame."""
        self.position = self.position + self.velocity

    def distance_to_target(self) -> float:
        return distance(self.position, self.target_point)

    def has_overshot(self) -> bool:
        """True once the missile has moved past its target along its path."""
        if self.velocity.x == 0 and self.velocity.y == 0:
            return False
        return (self.target_point - self.position).dot(self.velocity) < 0

    def should_detonate(self, detonation_distance: float) -> bool:
        """
        Check whether the missile has reached its target this frame.

        A missile detonates when it is closer than `detonation_distance` to
        its target. A missile fast enough to step over that window detonates
        as soon as it is past the target.
        """
        return self.distance_to_target() < detonation_distance or self.has_overshot()

    def __repr__(self):
        return (f"Missile({self.category}, pos=({self.position.x:.1f}, {self.position.y:.1f}), "
                f"target=({self.target_point.x:.1f}, {self.target_point.y:.1f}))")


def launch_player_missile(base_position: Position, target: Position, speed: float) -> Missile:
    """Create a defensive missile fired from a base toward a clicked point."""
    return Missile(base_position, target, speed, MissileCategory.PLAYER)


def launch_nuke(from_x: float, launch_y: float, target_x: float, target_y: float,
                speed: float) -> Missile:
    """Create an enemy missile falling from the top edge toward a ground target."""
    return Missile(Position(float(from_x), float(launch_y)),
                   Position(float(target_x), float(target_y)),
                   speed, MissileCategory.ENEMY)
