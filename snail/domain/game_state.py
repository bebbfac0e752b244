"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional

from .constants import DIRECTION_NAMES, Position, Velocity


class GameState:
    """
    A snapshot of the game taken between two ticks.

    Renderers only ever see this copy, never the live engine.

    Attributes:
        tick: number of completed ticks in this session
        body: list of (x, y) from tail to head
        food: (x, y) of the food, None once the board is full
        score: current score
        width, height: board dimensions
        paused, game_over, won: session flags
        delay_ms: delay before the next tick
        direction: current heading
        old_tail: cell vacated by the last move, if any
    """

    def __init__(
        self,
        tick: int,
        body: List[Position],
        food: Optional[Position],
        score: int,
        width: int,
        height: int,
        paused: bool = False,
        game_over: bool = False,
        won: bool = False,
        delay_ms: int = 0,
        direction: Optional[Velocity] = None,
        old_tail: Optional[Position] = None,
    ):
        self.tick = tick
        self.body = body
        self.food = food
        self.score = score
        self.width = width
        self.height = height
        self.paused = paused
        self.game_over = game_over
        self.won = won
        self.delay_ms = delay_ms
        self.direction = direction
        self.old_tail = old_tail

    @property
    def head(self) -> Position:
        return self.body[-1]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty cell
        F = food
        o = snail body
        @ = snail head
        Rows are printed top to bottom, like the terminal shows them.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for x, y in self.body:
            board[y][x] = 'o'
        hx, hy = self.head
        board[hy][hx] = '@'

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        direction = DIRECTION_NAMES.get(self.direction, "none")
        return (
            f"<GameState tick={self.tick}, score={self.score}, length={len(self.body)}, "
            f"food={self.food}, direction={direction}, game_over={self.game_over}>"
        )
