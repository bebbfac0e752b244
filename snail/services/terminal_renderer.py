"""
Curses renderer for Snail.

Draws the board from a GameState snapshot. Each grid cell is two terminal
columns wide so the board looks square. Colours are described by a
RenderStyle handed to the renderer; nothing here is global.
"""

import curses
import logging
import threading
from dataclasses import dataclass
from typing import Dict, Optional

from snail.domain.game_state import GameState

logger = logging.getLogger(__name__)

CELL = "  "
PAUSE_TEXT = "Paused, wanna resume? p"


class RenderSink:
    """Anything that can redraw the full board from a snapshot."""

    def render(self, state: GameState) -> None:
        raise NotImplementedError

    def __call__(self, state: GameState) -> None:
        self.render(state)


@dataclass(frozen=True)
class RenderStyle:
    """(foreground, background) colour pairs for every board element."""

    text: tuple = (curses.COLOR_WHITE, curses.COLOR_BLACK)
    wall: tuple = (curses.COLOR_BLUE, curses.COLOR_BLACK)
    body: tuple = (curses.COLOR_WHITE, curses.COLOR_WHITE)
    head: tuple = (curses.COLOR_GREEN, curses.COLOR_GREEN)
    food: tuple = (curses.COLOR_RED, curses.COLOR_RED)

    ELEMENTS = ("text", "wall", "body", "head", "food")

    def attributes(self, colors: bool) -> Dict[str, int]:
        """
        Register colour pairs with curses and return one attribute per element.

        Without colour support the snail and food fall back to reverse video.
        """
        if not colors:
            return {
                "text": curses.A_NORMAL,
                "wall": curses.A_NORMAL,
                "body": curses.A_REVERSE,
                "head": curses.A_REVERSE | curses.A_BOLD,
                "food": curses.A_REVERSE,
            }
        attrs = {}
        for pair_number, name in enumerate(self.ELEMENTS, start=1):
            fg, bg = getattr(self, name)
            curses.init_pair(pair_number, fg, bg)
            attrs[name] = curses.color_pair(pair_number)
        return attrs


class CursesRenderer(RenderSink):
    """
    Renders snapshots into a curses window.

    Only called from the simulation thread between ticks; the lock keeps
    it from interleaving with keyboard polling on the input thread.
    """

    def __init__(
        self,
        screen,
        style: Optional[RenderStyle] = None,
        colors: bool = False,
        screen_lock: Optional[threading.Lock] = None,
    ):
        self.screen = screen
        self.style = style or RenderStyle()
        self.attrs = self.style.attributes(colors)
        self.screen_lock = screen_lock or threading.Lock()
        logger.debug("Renderer ready (colors=%s)", colors)

    def render(self, state: GameState) -> None:
        with self.screen_lock:
            self.screen.erase()
            self.draw_board(state)
            if state.game_over:
                self.draw_game_over(state)
            elif state.paused:
                self.draw_pause(state)
            self.screen.refresh()

    def _put(self, row: int, col: int, text: str, attr: int) -> None:
        try:
            self.screen.addstr(row, col, text, attr)
        except curses.error:
            # Terminal too small, or writing the bottom-right cell
            pass

    def _put_cell(self, x: int, y: int, attr: int) -> None:
        self._put(y + 1, x * 2 + 1, CELL, attr)

    def draw_board(self, state: GameState) -> None:
        wall = self.attrs["wall"]
        inner = "-" * (state.width * 2)
        self._put(0, 0, "+" + inner + "+", wall)
        self._put(state.height + 1, 0, "+" + inner + "+", wall)
        for row in range(1, state.height + 1):
            self._put(row, 0, "|", wall)
            self._put(row, state.width * 2 + 1, "|", wall)

        if state.food is not None:
            self._put_cell(state.food[0], state.food[1], self.attrs["food"])
        for index, (x, y) in enumerate(state.body):
            is_head = index == len(state.body) - 1
            self._put_cell(x, y, self.attrs["head" if is_head else "body"])

        self._put(0, 1, f"Score: {state.score}", self.attrs["text"])

    def _centered(self, state: GameState, row: int, text: str) -> None:
        col = max(state.width + 1 - len(text) // 2, 0)
        self._put(row, col, text, self.attrs["text"])

    def draw_pause(self, state: GameState) -> None:
        self._centered(state, state.height // 2 + 1, PAUSE_TEXT)

    def draw_game_over(self, state: GameState) -> None:
        headline = "Game Over, you have WON!" if state.won else "Game Over, you lost!"
        lines = [
            headline,
            f"You reached a score of {state.score} points.",
            "Play Again? y/n",
        ]
        for index, text in enumerate(lines):
            self._centered(state, state.height // 2 + 1 + index, text)
