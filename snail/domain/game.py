"""
SnailGame - the tick-based simulation engine.

Owns the board, the snail, the scorer and the food. Rendering and input
are handled elsewhere: the engine only exposes state transitions and a
read-only GameState snapshot.
"""

import logging
import random
from itertools import islice
from typing import List, Optional

from .constants import (
    DEFAULT_DELAY_MS,
    DELAY_STEP_MS,
    MIN_DELAY_MS,
    Position,
    Velocity,
    is_valid_direction,
)
from .errors import BoardFullError
from .game_state import GameState
from .scorer import Scorer
from .snail import Snail

logger = logging.getLogger(__name__)

# (fill percent threshold, delay ceiling in ms): once the board is filled
# beyond the threshold the delay keeps dropping until it reaches the ceiling.
DELAY_BREAKPOINTS = (
    (90, 100),
    (80, 110),
    (70, 120),
    (60, 130),
    (50, 140),
    (40, 150),
    (30, 160),
    (20, 170),
    (10, 180),
)


class SnailGame:
    """
    Manages:
      - Board (width, height)
      - The snail and its heading
      - Food placement
      - Scoring
      - Tick delay
      - Pause / game over / win flags
    """

    def __init__(
        self,
        width: int,
        height: int,
        delay_ms: int = DEFAULT_DELAY_MS,
        rng: Optional[random.Random] = None,
    ):
        self.width = width
        self.height = height
        self.start_delay_ms = delay_ms
        self.rng = rng or random.Random()

        self.snail: Snail = None
        self.scorer: Scorer = None
        self.food: Optional[Position] = None
        self.delay_ms = delay_ms
        self.paused = False
        self.game_over = False
        self.won = False
        self.tick_count = 0

        self.reset()

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    def reset(self):
        """Discard the current snail, scorer and food and start over."""
        self.snail = Snail.spawn(self.width, self.height)
        self.scorer = Scorer(self.width, self.height)
        self.place_food()
        self.scorer.record_interval(self.snail.head, self.food)
        self.delay_ms = self.start_delay_ms
        self.paused = False
        self.game_over = False
        self.won = False
        self.tick_count = 0

    def free_cells(self) -> List[Position]:
        occupied = set(self.snail.body)
        return [
            Position(x, y)
            for x in range(self.width)
            for y in range(self.height)
            if (x, y) not in occupied
        ]

    def place_food(self) -> Position:
        """
        Put the food on a cell not occupied by the snail, chosen uniformly.

        Raises:
            BoardFullError: if the snail covers the whole board.
        """
        free = self.free_cells()
        if not free:
            raise BoardFullError("no free cell for food left")
        self.food = self.rng.choice(free)
        return self.food

    def won_game(self) -> bool:
        return len(self.snail) >= self.total_cells

    def is_valid_direction(self, new_direction: Velocity) -> bool:
        return is_valid_direction(self.snail.direction, new_direction)

    def change_direction(self, new_direction: Velocity) -> bool:
        """Apply a new heading. A 180 degree reversal is silently ignored."""
        if not self.is_valid_direction(new_direction):
            return False
        self.snail.direction = new_direction
        return True

    def toggle_pause(self) -> bool:
        self.paused = not self.paused
        return self.paused

    def collides(self, pos: Position, grew: bool) -> bool:
        """
        Would the head moving onto `pos` hit the body?

        Checked against the body before the move. Without growth the tail
        cell is vacated during the same tick, so it does not count.
        """
        body = self.snail.body
        segments = body if grew else islice(body, 1, None)
        return any(segment == pos for segment in segments)

    def adjust_delay(self) -> int:
        share = 100 * len(self.snail) / self.total_cells
        delay = self.delay_ms
        if any(share > threshold and delay > ceiling for threshold, ceiling in DELAY_BREAKPOINTS):
            delay = max(delay - DELAY_STEP_MS, MIN_DELAY_MS)
        if delay != self.delay_ms:
            logger.debug("Board %.1f%% full, delay %d -> %d ms", share, self.delay_ms, delay)
        self.delay_ms = delay
        return delay

    def tick(self, next_direction: Optional[Velocity] = None) -> GameState:
        """
        Execute one tick:
          1) Apply at most one pending direction change
          2) Handle a pickup if the head sits on the food
          3) Compute the next head (wrapping around the torus)
          4) End the game on self-collision
          5) End the game if the board is full
          6) Move, count the step, adapt the delay
        Does nothing while paused or after the game ended.
        """
        if self.paused or self.game_over:
            return self.state()

        if next_direction is not None:
            self.change_direction(next_direction)

        ate = False
        if self.food is not None and self.snail.head == self.food:
            ate = True
            awarded = self.scorer.compute_score_on_pickup()
            logger.debug("Pickup at %s: +%d (score %d)", self.food, awarded, self.scorer.score)
            if self.won_game():
                # The last free cell was just eaten
                self.food = None
                self._end(won=True)
                return self.state()
            self.place_food()
            self.scorer.record_interval(self.snail.head, self.food)

        next_head = self.snail.compute_next_head(self.snail.head, self.width, self.height)
        if self.collides(next_head, grew=ate):
            self._end(won=False)
            return self.state()

        if self.won_game():
            self._end(won=True)
            return self.state()

        self.snail.advance(ate, self.width, self.height)
        self.scorer.step()
        self.adjust_delay()
        self.tick_count += 1
        return self.state()

    def _end(self, won: bool):
        self.game_over = True
        self.won = won
        logger.info(
            "Game over (%s) with score %d, length %d after %d ticks",
            "won" if won else "lost",
            self.scorer.score,
            len(self.snail),
            self.tick_count,
        )

    def state(self) -> GameState:
        """Return a snapshot of the current board as a GameState."""
        return GameState(
            tick=self.tick_count,
            body=list(self.snail.body),
            food=self.food,
            score=self.scorer.score,
            width=self.width,
            height=self.height,
            paused=self.paused,
            game_over=self.game_over,
            won=self.won,
            delay_ms=self.delay_ms,
            direction=self.snail.direction,
            old_tail=self.snail.old_tail,
        )
