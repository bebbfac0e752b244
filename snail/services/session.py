"""
Game session runtime.

Two threads of control share one SnailGame:
 - the simulation thread (GameSession) owns every mutation of the game,
   ticking it on a fixed delay and rendering between ticks;
 - the input thread (GameDriver) polls a Player for commands and hands
   them over through two single-slot channels, one for directions and one
   for pause toggles.

Restarting cancels the old session and starts a new one; nothing is reset
in place while a simulation thread is still running.
"""

import logging
import threading
from typing import Any, Callable, Optional

from snail.domain.commands import Command, Quit, Restart, SetDirection, TogglePause
from snail.domain.constants import Velocity
from snail.domain.errors import SnailError
from snail.domain.game import SnailGame
from snail.domain.game_state import GameState
from snail.players.base import Player

logger = logging.getLogger(__name__)


class HandoffSlot:
    """
    A channel holding at most one item.

    put() blocks until a receiver has taken the item, offer() replaces a
    pending item without blocking (last wins), poll() never blocks and
    take() blocks until an item arrives. Once closed, every call returns
    immediately and pending senders and receivers are woken up.
    Items must not be None: None means "nothing there".
    """

    def __init__(self):
        self._cond = threading.Condition()
        self._item: Any = None
        self._closed = False

    @property
    def closed(self) -> bool:
        with self._cond:
            return self._closed

    def put(self, item: Any) -> bool:
        """Hand over `item` and wait until it is consumed. False if the slot closed first."""
        with self._cond:
            while self._item is not None and not self._closed:
                self._cond.wait()
            if self._closed:
                return False
            self._item = item
            self._cond.notify_all()
            while self._item is item and not self._closed:
                self._cond.wait()
            if self._item is item:
                # closed before anyone took it
                self._item = None
                return False
            return True

    def offer(self, item: Any) -> bool:
        with self._cond:
            if self._closed:
                return False
            self._item = item
            self._cond.notify_all()
            return True

    def poll(self) -> Any:
        with self._cond:
            return self._take_locked()

    def take(self) -> Any:
        """Block until an item is available; None once the slot is closed."""
        with self._cond:
            while self._item is None and not self._closed:
                self._cond.wait()
            return self._take_locked()

    def close(self) -> None:
        with self._cond:
            self._closed = True
            self._cond.notify_all()

    def _take_locked(self) -> Any:
        item = self._item
        if item is not None:
            self._item = None
            self._cond.notify_all()
        return item


class GameSession:
    """
    Runs one game on a background thread.

    Every iteration first checks for cancellation, then probes the
    direction and pause slots without blocking. A pause toggle parks the
    thread on the pause slot until the next toggle or cancellation.
    """

    def __init__(
        self,
        game: SnailGame,
        render: Optional[Callable[[GameState], None]] = None,
    ):
        self.game = game
        self.render = render
        self.directions = HandoffSlot()
        self.pauses = HandoffSlot()
        self.cancelled = threading.Event()
        self.finished = threading.Event()
        self.error: Optional[BaseException] = None
        self.latest_state: Optional[GameState] = None
        self._thread: Optional[threading.Thread] = None

    def start(self) -> "GameSession":
        self._thread = threading.Thread(target=self._run, name="snail-session", daemon=True)
        self._thread.start()
        return self

    def set_direction(self, direction: Velocity) -> bool:
        return self.directions.offer(direction)

    def toggle_pause(self) -> bool:
        return self.pauses.put(True)

    def cancel(self) -> None:
        self.cancelled.set()
        self.directions.close()
        self.pauses.close()

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)

    @property
    def ended(self) -> bool:
        return self.finished.is_set()

    @property
    def game_over(self) -> bool:
        return self.latest_state is not None and self.latest_state.game_over

    def _publish(self, state: GameState) -> None:
        self.latest_state = state
        if self.render is not None:
            self.render(state)

    def _wait_for_resume(self) -> bool:
        self.game.toggle_pause()
        self._publish(self.game.state())
        if self.pauses.take() is None:
            return False
        self.game.toggle_pause()
        self._publish(self.game.state())
        return True

    def _run(self) -> None:
        logger.info("Session started on a %dx%d board", self.game.width, self.game.height)
        try:
            self.game.reset()
            self._publish(self.game.state())
            while not self.cancelled.is_set():
                direction = self.directions.poll()
                if self.pauses.poll() is not None and not self._wait_for_resume():
                    break
                state = self.game.tick(direction)
                self._publish(state)
                if state.game_over:
                    break
                self.cancelled.wait(self.game.delay_ms / 1000)
        except SnailError as exc:
            self.error = exc
            logger.exception("Session stopped by engine error")
        finally:
            self.directions.close()
            self.pauses.close()
            self.finished.set()
            logger.info("Session finished (score %d)", self.game.scorer.score)


class GameDriver:
    """
    The input loop: polls the player and forwards commands to the session.

    Runs on the calling thread until the player quits.
    """

    def __init__(
        self,
        game: SnailGame,
        player: Player,
        render: Optional[Callable[[GameState], None]] = None,
    ):
        self.game = game
        self.player = player
        self.render = render
        self.session: Optional[GameSession] = None
        self.sessions_started = 0

    def start_session(self) -> GameSession:
        if self.session is not None:
            self.session.cancel()
            self.session.join()
        self.session = GameSession(self.game, self.render).start()
        self.sessions_started += 1
        return self.session

    def handle(self, command: Command) -> bool:
        """Apply one command. Returns False when the driver should stop."""
        if isinstance(command, Quit):
            return False
        if isinstance(command, SetDirection):
            self.session.set_direction(command.direction)
        elif isinstance(command, TogglePause):
            self.session.toggle_pause()
        elif isinstance(command, Restart):
            if self.session.ended or self.session.game_over:
                logger.info("Restarting")
                self.start_session()
            else:
                logger.debug("Ignoring restart while the game is running")
        return True

    def run(self) -> Optional[GameState]:
        """Drive sessions until Quit. Returns the last published state."""
        self.start_session()
        try:
            while True:
                if self.session.error is not None:
                    raise self.session.error
                command = self.player.next_command(self.session.latest_state)
                if command is None:
                    continue
                if not self.handle(command):
                    break
        finally:
            self.session.cancel()
            self.session.join()
        return self.session.latest_state
