"""Ground installations: missile bases and cities."""

from dataclasses import dataclass
from typing import Optional

from .constants import LOW_MISSILE_THRESHOLD
from .geometry import Position


@dataclass
class Base:
    """A launch silo with a finite missile stock."""
    id: int
    position: Position
    missiles_remaining: int

    @property
    def has_missiles(self) -> bool:
        return self.missiles_remaining > 0

    def take_missile(self) -> bool:
        """Remove one missile from the stock. Returns False when empty."""
        if self.missiles_remaining <= 0:
            return False
        self.missiles_remaining -= 1
        return True

    def destroy(self):
        """A destroyed base stays on the ground but can no longer launch."""
        self.missiles_remaining = 0

    @property
    def caption(self) -> Optional[str]:
        return base_caption(self.missiles_remaining)


@dataclass
class City:
    """A city on the ground line."""
    position: Position


def base_caption(missiles_remaining: int) -> Optional[str]:
    """Display-only caption for a base: OUT when empty, LOW when nearly empty."""
    if missiles_remaining == 0:
        return "OUT"
    if missiles_remaining <= LOW_MISSILE_THRESHOLD:
        return "LOW"
    return None
