"""
Snail entity for the game engine.
"""

from collections import deque
from typing import Iterable, Optional

from .constants import START_DIRECTION, START_LENGTH, Position, Velocity


class Snail:
    """
    Represents the snail on the board.

    Attributes:
        body: deque of Position from tail at index 0 to head at the end
        direction: current heading, applied blindly on every advance
        old_tail: the cell vacated by the last non-growing move
    """

    def __init__(self, body: Iterable[Position], direction: Velocity = START_DIRECTION):
        self.body = deque(Position(*pos) for pos in body)
        self.direction = direction
        self.old_tail: Optional[Position] = None

    @classmethod
    def spawn(cls, width: int, height: int) -> "Snail":
        """A horizontal snail in the middle of the board, heading east."""
        cx, cy = width // 2, height // 2
        return cls([Position((cx + i) % width, cy) for i in range(START_LENGTH)])

    @property
    def head(self) -> Position:
        """Return the head position (last element)."""
        return self.body[-1]

    def __len__(self) -> int:
        return len(self.body)

    def __contains__(self, pos) -> bool:
        return pos in self.body

    def compute_next_head(self, current_head: Position, width: int, height: int) -> Position:
        # Python's % is floor-mod, so -1 wraps to dimension - 1
        return Position(
            (current_head.x + self.direction.x) % width,
            (current_head.y + self.direction.y) % height,
        )

    def advance(self, grew: bool, width: int, height: int) -> Position:
        """Move one cell forward; keep the tail if the snail grew. Returns the new head."""
        new_head = self.compute_next_head(self.head, width, height)
        self.body.append(new_head)
        if not grew:
            self.old_tail = self.body.popleft()
        return new_head

    def __repr__(self):
        return f"<Snail length={len(self.body)}, head={self.head}, direction={self.direction}>"
