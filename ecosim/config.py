"""Simulation configuration dataclass."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any

from ecosim.clock import CYCLE_LENGTH
from ecosim.types import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_DEPTH = 70
DEFAULT_WIDTH = 120


@dataclass(frozen=True)
class SimulationConfig:
    """Immutable settings for one simulator.

    Attributes:
        depth: Number of grid rows.
        width: Number of grid columns.
        cycle_length: Ticks in one day/night cycle.
        random_introduction: Whether migrants are spawned from outside.
        introduction_threshold: Cycle progress after which migrants arrive.
        introduction_attempts: Spawn trials per tick once past the threshold.
        delay: Seconds to pause between ticks in ``run``. Zero disables it.
        long_run_length: Ticks run by ``Simulator.run_long``.
    """

    depth: int = DEFAULT_DEPTH
    width: int = DEFAULT_WIDTH
    cycle_length: int = CYCLE_LENGTH
    random_introduction: bool = True
    introduction_threshold: float = 0.2
    introduction_attempts: int = 20
    delay: float = 0.0
    long_run_length: int = 4000

    @classmethod
    def create(cls, **kwargs: Any) -> SimulationConfig:
        """Build a validated config, falling back to default grid dimensions.

        Non-positive ``depth`` or ``width`` are replaced by the defaults
        (both together) with a warning; any other bad value raises
        ``ConfigError``.
        """
        config = cls(**kwargs)
        if config.depth <= 0 or config.width <= 0:
            logger.warning(
                "grid dimensions must be greater than zero (got %dx%d); "
                "using defaults %dx%d",
                config.depth, config.width, DEFAULT_DEPTH, DEFAULT_WIDTH,
            )
            config = replace(config, depth=DEFAULT_DEPTH, width=DEFAULT_WIDTH)
        config.validate()
        return config

    def validate(self) -> None:
        if self.depth <= 0 or self.width <= 0:
            raise ConfigError(f"grid dimensions must be positive, got {self.depth}x{self.width}")
        if self.cycle_length <= 0:
            raise ConfigError("cycle_length must be positive")
        if not 0.0 <= self.introduction_threshold <= 1.0:
            raise ConfigError("introduction_threshold must lie in [0, 1]")
        if self.introduction_attempts < 0:
            raise ConfigError("introduction_attempts must not be negative")
        if self.delay < 0:
            raise ConfigError("delay must not be negative")
        if self.long_run_length < 0:
            raise ConfigError("long_run_length must not be negative")
