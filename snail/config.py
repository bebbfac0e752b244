"""
Session configuration.

Values come from the command line, falling back to environment variables
(a .env file is honoured through python-dotenv) and then to the defaults
below. Out-of-range values are clamped.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from snail.domain.constants import (
    DEFAULT_DELAY_MS,
    DEFAULT_DIMENSION,
    MAX_DELAY_MS,
    MAX_DIMENSION,
    MIN_DELAY_MS,
    MIN_DIMENSION,
)

logger = logging.getLogger(__name__)

DELAY_ENV = "SNAIL_DELAY_MS"
DIMENSIONS_ENV = "SNAIL_DIMENSIONS"
LOG_FILE_ENV = "SNAIL_LOG_FILE"
LOG_LEVEL_ENV = "SNAIL_LOG_LEVEL"

DEFAULT_LOG_FILE = "snail.log"
DEFAULT_LOG_LEVEL = "INFO"


def clamp(value: int, low: int, high: int, name: str) -> int:
    clamped = min(max(value, low), high)
    if clamped != value:
        logger.warning("%s=%d is out of range [%d, %d], using %d", name, value, low, high, clamped)
    return clamped


def env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default


@dataclass
class GameConfig:
    delay_ms: int = DEFAULT_DELAY_MS
    dimension: int = DEFAULT_DIMENSION

    def __post_init__(self):
        self.delay_ms = clamp(self.delay_ms, MIN_DELAY_MS, MAX_DELAY_MS, "delay")
        self.dimension = clamp(self.dimension, MIN_DIMENSION, MAX_DIMENSION, "dimensions")

    @property
    def width(self) -> int:
        return self.dimension

    @property
    def height(self) -> int:
        return self.dimension

    @classmethod
    def load(cls, delay_ms: Optional[int] = None, dimension: Optional[int] = None) -> "GameConfig":
        """Build a config, filling unset values from the environment."""
        if delay_ms is None:
            delay_ms = env_int(DELAY_ENV, DEFAULT_DELAY_MS)
        if dimension is None:
            dimension = env_int(DIMENSIONS_ENV, DEFAULT_DIMENSION)
        return cls(delay_ms=delay_ms, dimension=dimension)
