"""Viability checks deciding whether a run should continue."""
from __future__ import annotations

from collections import Counter
from typing import Mapping

from ecosim.agent import Agent
from ecosim.grid import Grid
from ecosim.species import PREDATORS, PREY, Species
from ecosim.types import ViabilityCheck


def counts_by_species(grid: Grid) -> Counter[Species]:
    """Count live agents on the grid, ignoring any non-agent occupants."""
    counts: Counter[Species] = Counter()
    for _, occupant in grid.occupied():
        if isinstance(occupant, Agent) and occupant.alive:
            counts[occupant.species] += 1
    return counts


def predator_prey_viable(grid: Grid, counts: Mapping[Species, int]) -> bool:
    """True while some predator species and some prey species survive."""
    has_predator = any(counts.get(s, 0) > 0 for s in PREDATORS)
    has_prey = any(counts.get(s, 0) > 0 for s in PREY)
    return has_predator and has_prey


def species_diversity_viable(min_species: int = 2) -> ViabilityCheck:
    """Build a check that holds while ``min_species`` species are present."""
    if min_species <= 0:
        raise ValueError("min_species must be positive")

    def check(grid: Grid, counts: Mapping[Species, int]) -> bool:
        return sum(1 for n in counts.values() if n > 0) >= min_species

    return check
