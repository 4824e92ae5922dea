"""ecosim - a five-species predator/prey ecosystem on a bounded grid."""

from ecosim.agent import Agent
from ecosim.clock import DayNightClock
from ecosim.config import SimulationConfig
from ecosim.disease import Infection
from ecosim.grid import Grid
from ecosim.population import Population
from ecosim.random_source import ScriptedRandom, make_random
from ecosim.simulator import Simulator
from ecosim.species import TRAITS, Species, Traits
from ecosim.stats import SimulationStats
from ecosim.types import (
    ConfigError,
    DeathCause,
    InvariantViolation,
    Location,
    RandomSource,
    Sex,
)
from ecosim.viability import (
    counts_by_species,
    predator_prey_viable,
    species_diversity_viable,
)

__all__ = [
    "Agent",
    "ConfigError",
    "DayNightClock",
    "DeathCause",
    "Grid",
    "Infection",
    "InvariantViolation",
    "Location",
    "Population",
    "RandomSource",
    "ScriptedRandom",
    "Sex",
    "SimulationConfig",
    "SimulationStats",
    "Simulator",
    "Species",
    "TRAITS",
    "Traits",
    "counts_by_species",
    "make_random",
    "predator_prey_viable",
    "species_diversity_viable",
]
