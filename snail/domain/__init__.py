"""
Domain entities for the Snail game engine.

This module contains the core game entities that are independent of
infrastructure concerns (terminal, keyboard, threads).
"""

from .constants import (
    NORTH, SOUTH, EAST, WEST, DIRECTIONS, Position, Velocity, is_valid_direction,
)
from .commands import Command, SetDirection, TogglePause, Restart, Quit
from .errors import SnailError, InvalidStateError, BoardFullError
from .scorer import Scorer, toroidal_distance
from .snail import Snail
from .game_state import GameState
from .game import SnailGame

__all__ = [
    'NORTH', 'SOUTH', 'EAST', 'WEST', 'DIRECTIONS', 'Position', 'Velocity',
    'is_valid_direction',
    'Command', 'SetDirection', 'TogglePause', 'Restart', 'Quit',
    'SnailError', 'InvalidStateError', 'BoardFullError',
    'Scorer', 'toroidal_distance',
    'Snail',
    'GameState',
    'SnailGame',
]
