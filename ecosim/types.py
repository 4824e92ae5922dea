"""Shared types, errors and protocols for the ecosystem simulation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Mapping, Protocol

if TYPE_CHECKING:
    from ecosim.grid import Grid
    from ecosim.species import Species


@dataclass(frozen=True, slots=True)
class Location:
    row: int
    col: int


class Sex(Enum):
    MALE = "M"
    FEMALE = "F"


class InvariantViolation(ValueError):
    """Raised when a grid or agent invariant is broken by the caller."""


class ConfigError(ValueError):
    """Raised on configuration values that cannot fall back to a default."""


class RandomSource(Protocol):
    """Uniform random draws used by every stochastic decision.

    ``random.Random`` conforms; tests inject a scripted source instead.
    """

    def random(self) -> float: ...
    def randrange(self, stop: int) -> int: ...


Observer = Callable[[int, "Grid", float, int], None]

ViabilityCheck = Callable[["Grid", Mapping["Species", int]], bool]


class DeathCause(Enum):
    OLD_AGE = "old_age"
    STARVATION = "starvation"
    DISEASE = "disease"
    OVERCROWDING = "overcrowding"
    EATEN = "eaten"
    DISPLACED = "displaced"
