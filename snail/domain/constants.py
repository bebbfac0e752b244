"""
Game constants and grid geometry for Snail.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional


class Position(NamedTuple):
    x: int
    y: int


@dataclass(frozen=True)
class Velocity:
    """A unit step on the grid. y grows downwards, like terminal rows."""

    x: int
    y: int

    def opposite(self) -> "Velocity":
        return Velocity(-self.x, -self.y)

    def is_opposite_of(self, other: "Velocity") -> bool:
        return self.x == -other.x and self.y == -other.y


# Movement directions
NORTH = Velocity(0, -1)
SOUTH = Velocity(0, 1)
EAST = Velocity(1, 0)
WEST = Velocity(-1, 0)
DIRECTIONS = (NORTH, SOUTH, EAST, WEST)

DIRECTION_NAMES = {
    NORTH: "NORTH",
    SOUTH: "SOUTH",
    EAST: "EAST",
    WEST: "WEST",
}

# Game settings
START_LENGTH = 3
START_DIRECTION = EAST
MAX_POINTS = 10

# Tick delay bounds (milliseconds)
DEFAULT_DELAY_MS = 150
MIN_DELAY_MS = 100
MAX_DELAY_MS = 200
DELAY_STEP_MS = 10

# Board bounds (cells per side)
DEFAULT_DIMENSION = 20
MIN_DIMENSION = 10
MAX_DIMENSION = 50


def is_valid_direction(current: Optional[Velocity], new: Velocity) -> bool:
    """
    Return True if `new` may replace the heading `current`.

    Only a 180 degree reversal is rejected. With no current heading every
    one of the four directions is accepted.
    """
    if new not in DIRECTIONS:
        return False
    if current is None or current not in DIRECTIONS:
        return True
    return not new.is_opposite_of(current)
