"""
Runtime services for Snail: the session threads and the terminal renderer.
"""

from .session import GameDriver, GameSession, HandoffSlot
from .terminal_renderer import CursesRenderer, RenderSink, RenderStyle

__all__ = [
    'GameDriver',
    'GameSession',
    'HandoffSlot',
    'CursesRenderer',
    'RenderSink',
    'RenderStyle',
]
