"""Disease - infection state, transmission, recovery and disease deaths.

An infection lasts ``DISEASE_LENGTH`` ticks. Each tick a diseased agent may
pass it on to every occupied neighbour and may die of it; healthy agents
can catch it spontaneously. Newborns of a diseased parent start infected
with probability ``INHERITANCE_PROBABILITY``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ecosim.types import DeathCause, RandomSource

if TYPE_CHECKING:
    from ecosim.agent import Agent

DISEASE_LENGTH = 20
RANDOM_INFECTION_PROBABILITY = 0.0002
DEATH_PROBABILITY = 0.20
TRANSMISSION_PROBABILITY = 0.04
INHERITANCE_PROBABILITY = 0.75


@dataclass
class Infection:
    ticks_remaining: int = 0

    @property
    def diseased(self) -> bool:
        return self.ticks_remaining > 0

    def infect(self) -> None:
        self.ticks_remaining = DISEASE_LENGTH


def inherit(parent_diseased: bool, rng: RandomSource) -> Infection:
    """Infection for a newborn; only draws when the parent is diseased."""
    infection = Infection()
    if parent_diseased and rng.random() <= INHERITANCE_PROBABILITY:
        infection.infect()
    return infection


def disease_tick(agent: Agent, rng: RandomSource) -> None:
    from ecosim.agent import Agent

    if not agent.alive:
        return
    infection = agent.infection

    if infection.diseased:
        grid = agent.grid
        for loc in grid.adjacent_locations(agent.location):
            other = grid.occupant_at(loc)
            if isinstance(other, Agent) and rng.random() <= TRANSMISSION_PROBABILITY:
                other.infection.infect()
    elif rng.random() <= RANDOM_INFECTION_PROBABILITY:
        infection.infect()

    if infection.ticks_remaining == 0:
        return

    infection.ticks_remaining -= 1
    if rng.random() <= DEATH_PROBABILITY:
        agent.die(DeathCause.DISEASE)
