"""
Snail - a snake game on a toroidal grid, played in the terminal.
"""

__version__ = "0.0.1"
