"""
Scorer entity - awards points per food pickup.

Points depend on how directly the snail reached the food: the number of
steps taken is compared with the shortest toroidal path between where the
head was and where the food was when the interval started.
"""

import math
from typing import Optional

from .constants import MAX_POINTS, Position
from .errors import InvalidStateError


def toroidal_distance(a: Position, b: Position, width: int, height: int) -> int:
    """
    Manhattan distance between two cells on a torus.

    Takes the minimum of five candidate paths: direct, wrapping on the
    X axis through the left or right edge, and wrapping on the Y axis
    through the top or bottom edge.
    """
    dx = abs(a.x - b.x)
    dy = abs(a.y - b.y)
    center = dx + dy
    left = (a.x + width - b.x) + dy
    right = (width - a.x + b.x) + dy
    top = dx + (a.y + height - b.y)
    bottom = dx + (height - a.y + b.y)
    return min(center, left, right, top, bottom)


def round_half_up(value: float) -> int:
    """Round half away from zero (Python's round() goes to even)."""
    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)


class Scorer:
    """
    Tracks the cumulative score of one game.

    Attributes:
        score: total points so far, never decreases
        steps: ticks since the last pickup (or game start)
        width, height: board dimensions
        max_points: points for a perfect path
        old_head_pos, old_food_pos: reference points of the current interval
    """

    def __init__(self, width: int, height: int, max_points: int = MAX_POINTS):
        self.score = 0
        self.steps = 0
        self.width = width
        self.height = height
        self.max_points = max_points
        self.old_head_pos: Optional[Position] = None
        self.old_food_pos: Optional[Position] = None

    def record_interval(self, head: Position, food: Position) -> None:
        self.old_head_pos = Position(*head)
        self.old_food_pos = Position(*food)

    def step(self) -> None:
        self.steps += 1

    def reset_steps(self) -> None:
        self.steps = 0

    def points_for(self, steps: int, distance: int) -> int:
        """Points awarded for reaching food `distance` cells away in `steps` ticks."""
        half_area = (self.width * self.height) // 2

        # Should not happen: the snail cannot beat the shortest path.
        if steps < distance:
            return self.max_points

        # Dawdled too long -> floor
        if steps - distance >= half_area:
            return 1

        x = (steps - distance) / half_area
        fraction = (1 - (2 * x - 1) ** 3) / 2
        return max(round_half_up(fraction * self.max_points), 1)

    def compute_score_on_pickup(self) -> int:
        """
        Add the points for the pickup that just happened and return them.

        Resets the step counter, also when raising.

        Raises:
            InvalidStateError: if no step was taken since the last pickup.
        """
        try:
            if self.steps < 1:
                raise InvalidStateError("cannot calculate score when no steps were made")
            distance = toroidal_distance(
                self.old_head_pos, self.old_food_pos, self.width, self.height
            )
            awarded = self.points_for(self.steps, distance)
            self.score += awarded
            return awarded
        finally:
            self.reset_steps()

    def __repr__(self):
        return f"<Scorer score={self.score}, steps={self.steps}>"
