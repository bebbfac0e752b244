"""
Tests for the players: keyboard mapping and the random autopilot.
"""

import curses
import random
from unittest.mock import MagicMock

import pytest

from snail.domain.commands import Quit, Restart, SetDirection, TogglePause
from snail.domain.constants import EAST, NORTH, SOUTH, WEST, Position
from snail.domain.game_state import GameState
from snail.players.keyboard_player import KEY_ESCAPE, KeyboardPlayer, command_for_key
from snail.players.random_player import RandomPlayer


def make_state(body, direction=EAST, game_over=False, width=10, height=10):
    return GameState(
        tick=0,
        body=[Position(*p) for p in body],
        food=Position(0, 9),
        score=0,
        width=width,
        height=height,
        game_over=game_over,
        direction=direction,
    )


class TestCommandForKey:
    """Tests for command_for_key()."""

    @pytest.mark.parametrize(
        "key, direction",
        [
            (curses.KEY_UP, NORTH),
            (ord('w'), NORTH),
            (curses.KEY_DOWN, SOUTH),
            (ord('s'), SOUTH),
            (curses.KEY_LEFT, WEST),
            (ord('a'), WEST),
            (curses.KEY_RIGHT, EAST),
            (ord('d'), EAST),
        ],
    )
    def test_steering_keys(self, key, direction):
        assert command_for_key(key) == SetDirection(direction)

    def test_pause_key(self):
        assert command_for_key(ord('p')) == TogglePause()

    def test_escape_always_quits(self):
        assert command_for_key(KEY_ESCAPE) == Quit()
        assert command_for_key(KEY_ESCAPE, game_over=True) == Quit()

    def test_restart_and_no_only_after_game_over(self):
        assert command_for_key(ord('y')) is None
        assert command_for_key(ord('n')) is None
        assert command_for_key(ord('y'), game_over=True) == Restart()
        assert command_for_key(ord('n'), game_over=True) == Quit()

    def test_unknown_key(self):
        assert command_for_key(ord('x')) is None


class TestKeyboardPlayer:
    """Tests for the KeyboardPlayer class."""

    def test_configures_screen_polling(self):
        screen = MagicMock()
        KeyboardPlayer(screen, poll_ms=30)
        screen.keypad.assert_called_once_with(True)
        screen.timeout.assert_called_once_with(30)

    def test_translates_key(self):
        screen = MagicMock()
        screen.getch.return_value = ord('w')
        player = KeyboardPlayer(screen)
        assert player.next_command(None) == SetDirection(NORTH)

    def test_no_key_pressed(self):
        screen = MagicMock()
        screen.getch.return_value = curses.ERR
        player = KeyboardPlayer(screen)
        assert player.next_command(None) is None

    def test_restart_uses_game_over_flag(self):
        screen = MagicMock()
        screen.getch.return_value = ord('y')
        player = KeyboardPlayer(screen)
        running = make_state([(1, 1), (2, 1), (3, 1)])
        ended = make_state([(1, 1), (2, 1), (3, 1)], game_over=True)
        assert player.next_command(running) is None
        assert player.next_command(ended) == Restart()


class TestRandomPlayer:
    """Tests for the RandomPlayer class."""

    def test_never_reverses(self):
        player = RandomPlayer(rng=random.Random(1))
        state = make_state([(3, 5), (4, 5), (5, 5)], direction=EAST)
        for _ in range(50):
            assert player.get_move(state) != WEST

    def test_avoids_own_body(self):
        """The neck is never chosen; the tail cell is, since it moves away."""
        player = RandomPlayer(rng=random.Random(2))
        body = [(5, 4), (6, 4), (6, 5), (5, 5)]
        state = make_state(body, direction=WEST)
        moves = {player.get_move(state) for _ in range(100)}
        assert EAST not in moves
        assert moves <= {WEST, SOUTH, NORTH}

    def test_avoids_body_across_the_edge(self):
        player = RandomPlayer(rng=random.Random(3))
        body = [(9, 4), (9, 5), (9, 6), (0, 6), (0, 5)]
        state = make_state(body, direction=NORTH)
        # WEST wraps to (9, 5), which is body
        moves = {player.get_move(state) for _ in range(100)}
        assert WEST not in moves
        assert moves <= {NORTH, EAST}

    def test_trapped_keeps_heading(self):
        player = RandomPlayer(rng=random.Random(4))
        body = [(0, 0), (2, 1), (1, 0), (1, 2), (0, 1), (1, 1)]
        state = make_state(body, direction=EAST)
        assert player.get_move(state) == EAST

    def test_next_command(self):
        player = RandomPlayer(rng=random.Random(5))
        assert player.next_command(None) is None
        state = make_state([(3, 5), (4, 5), (5, 5)])
        assert isinstance(player.next_command(state), SetDirection)
        ended = make_state([(3, 5), (4, 5), (5, 5)], game_over=True)
        assert player.next_command(ended) == Quit()
