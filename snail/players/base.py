"""
Base player interface for the game driver.
"""

from typing import Optional

from snail.domain.commands import Command
from snail.domain.game_state import GameState


class Player:
    """
    Base class/interface for anything that steers the snail.

    The driver polls the player repeatedly and forwards whatever command
    it returns to the running session.
    """

    def next_command(self, game_state: Optional[GameState]) -> Optional[Command]:
        """
        Return the next command, or None if there is nothing to do yet.

        Args:
            game_state: Latest snapshot published by the session, if any

        Returns:
            One of SetDirection, TogglePause, Restart, Quit, or None
        """
        raise NotImplementedError
