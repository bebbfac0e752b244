"""
Keyboard player - translates curses key codes into game commands.
"""

import curses
import threading
from typing import Optional

from snail.domain.commands import Command, Quit, Restart, SetDirection, TogglePause
from snail.domain.constants import EAST, NORTH, SOUTH, WEST
from snail.domain.game_state import GameState
from .base import Player

KEY_ESCAPE = 27
KEY_CTRL_C = 3

KEY_DIRECTIONS = {
    curses.KEY_UP: NORTH,
    ord('w'): NORTH,
    curses.KEY_DOWN: SOUTH,
    ord('s'): SOUTH,
    curses.KEY_LEFT: WEST,
    ord('a'): WEST,
    curses.KEY_RIGHT: EAST,
    ord('d'): EAST,
}


def command_for_key(key: int, game_over: bool = False) -> Optional[Command]:
    """Map a key code to a command. Restart and the 'n' quit only work after game over."""
    if key in (KEY_ESCAPE, KEY_CTRL_C):
        return Quit()
    if key in KEY_DIRECTIONS:
        return SetDirection(KEY_DIRECTIONS[key])
    if key == ord('p'):
        return TogglePause()
    if game_over and key == ord('y'):
        return Restart()
    if game_over and key == ord('n'):
        return Quit()
    return None


class KeyboardPlayer(Player):
    """
    Polls a curses window for key presses.

    getch() waits at most `poll_ms` so the driver loop stays responsive.
    The lock is shared with the renderer: curses is not thread safe.
    """

    def __init__(self, screen, screen_lock: Optional[threading.Lock] = None, poll_ms: int = 50):
        self.screen = screen
        self.screen_lock = screen_lock or threading.Lock()
        self.screen.keypad(True)
        self.screen.timeout(poll_ms)

    def next_command(self, game_state: Optional[GameState]) -> Optional[Command]:
        with self.screen_lock:
            key = self.screen.getch()
        if key == curses.ERR:
            return None
        game_over = game_state is not None and game_state.game_over
        return command_for_key(key, game_over)
