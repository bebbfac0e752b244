"""
Exceptions raised by the Snail game engine.
"""


class SnailError(RuntimeError):
    """Base class for engine failures."""


class InvalidStateError(SnailError):
    """A scoring call was made with no steps taken since the last pickup."""


class BoardFullError(SnailError):
    """Food was requested but every cell is occupied by the snail."""
