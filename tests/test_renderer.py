"""
Tests for the curses renderer, drawn into a mocked window.
"""

import curses
from unittest.mock import MagicMock

from snail.domain.constants import EAST, Position
from snail.domain.game_state import GameState
from snail.services import terminal_renderer
from snail.services.terminal_renderer import PAUSE_TEXT, CursesRenderer, RenderStyle


def make_state(**overrides):
    params = dict(
        tick=1,
        body=[Position(1, 1), Position(2, 1), Position(3, 1)],
        food=Position(5, 5),
        score=12,
        width=10,
        height=10,
        direction=EAST,
    )
    params.update(overrides)
    return GameState(**params)


def written_texts(screen):
    return [c.args[2] for c in screen.addstr.call_args_list]


class TestRenderStyle:
    """Tests for RenderStyle."""

    def test_monochrome_attributes(self):
        attrs = RenderStyle().attributes(colors=False)
        assert attrs["body"] == curses.A_REVERSE
        assert attrs["text"] == curses.A_NORMAL
        assert set(attrs) == set(RenderStyle.ELEMENTS)

    def test_color_pairs_are_registered(self, monkeypatch):
        init_pair = MagicMock()
        monkeypatch.setattr(terminal_renderer.curses, "init_pair", init_pair)
        monkeypatch.setattr(terminal_renderer.curses, "color_pair", lambda n: n * 256)

        style = RenderStyle(food=(curses.COLOR_YELLOW, curses.COLOR_BLACK))
        attrs = style.attributes(colors=True)

        assert init_pair.call_count == 5
        init_pair.assert_any_call(5, curses.COLOR_YELLOW, curses.COLOR_BLACK)
        assert attrs["text"] == 256
        assert attrs["food"] == 5 * 256


class TestCursesRenderer:
    """Tests for CursesRenderer."""

    def test_render_draws_board_and_score(self):
        screen = MagicMock()
        renderer = CursesRenderer(screen)
        renderer.render(make_state())

        screen.erase.assert_called_once()
        screen.refresh.assert_called_once()
        texts = written_texts(screen)
        assert "Score: 12" in texts
        assert PAUSE_TEXT not in texts

    def test_cells_are_two_columns_wide(self):
        screen = MagicMock()
        attrs = RenderStyle().attributes(colors=False)
        renderer = CursesRenderer(screen)
        renderer.render(make_state())

        calls = [c.args for c in screen.addstr.call_args_list]
        assert (2, 7, "  ", attrs["head"]) in calls
        assert (2, 3, "  ", attrs["body"]) in calls
        assert (6, 11, "  ", attrs["food"]) in calls

    def test_pause_overlay(self):
        screen = MagicMock()
        CursesRenderer(screen).render(make_state(paused=True))
        assert PAUSE_TEXT in written_texts(screen)

    def test_game_over_overlay(self):
        screen = MagicMock()
        CursesRenderer(screen).render(make_state(game_over=True))
        texts = written_texts(screen)
        assert "Game Over, you lost!" in texts
        assert "You reached a score of 12 points." in texts
        assert "Play Again? y/n" in texts

    def test_win_overlay(self):
        screen = MagicMock()
        CursesRenderer(screen).render(make_state(game_over=True, won=True, food=None))
        assert "Game Over, you have WON!" in written_texts(screen)

    def test_curses_errors_are_ignored(self):
        """A terminal that is too small must not crash the renderer."""
        screen = MagicMock()
        screen.addstr.side_effect = curses.error("out of bounds")
        CursesRenderer(screen).render(make_state())
        screen.refresh.assert_called_once()

    def test_renderer_is_callable(self):
        screen = MagicMock()
        renderer = CursesRenderer(screen)
        renderer(make_state())
        screen.refresh.assert_called_once()
