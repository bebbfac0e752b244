"""
Player implementations for Snail.

This module contains the input sources that produce the commands
steering the snail: a human at the keyboard or a random autopilot.
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard_player import KeyboardPlayer, command_for_key

__all__ = [
    'Player',
    'RandomPlayer',
    'KeyboardPlayer',
    'command_for_key',
]
