"""
Random player implementation - picks random safe moves.
"""

import random
from typing import List, Optional

from snail.domain.commands import Command, Quit, SetDirection
from snail.domain.constants import DIRECTIONS, Position, Velocity, is_valid_direction
from snail.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    An autopilot that picks a direction avoiding self-collisions.

    There are no walls on the torus, so the only hazard is the body.
    Quits once the game is over.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Velocity:
        body = game_state.body
        head_x, head_y = body[-1]

        # Filter out moves that:
        # 1. Reverse the current heading
        # 2. Hit own body (except tail, which will move)
        valid_moves: List[Velocity] = []
        for move in DIRECTIONS:
            if not is_valid_direction(game_state.direction, move):
                continue
            new_pos = Position(
                (head_x + move.x) % game_state.width,
                (head_y + move.y) % game_state.height,
            )
            if new_pos in body[1:]:
                continue
            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            return game_state.direction or self.rng.choice(DIRECTIONS)

        return self.rng.choice(valid_moves)

    def next_command(self, game_state: Optional[GameState]) -> Optional[Command]:
        if game_state is None:
            return None
        if game_state.game_over:
            return Quit()
        return SetDirection(self.get_move(game_state))
