"""
Commands an input source can hand to the game driver.
"""

from dataclasses import dataclass
from typing import Union

from .constants import Velocity


@dataclass(frozen=True)
class SetDirection:
    direction: Velocity


@dataclass(frozen=True)
class TogglePause:
    pass


@dataclass(frozen=True)
class Restart:
    """Start a fresh session. Only honoured once the current game has ended."""


@dataclass(frozen=True)
class Quit:
    pass


Command = Union[SetDirection, TogglePause, Restart, Quit]
