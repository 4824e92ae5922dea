"""Population - slot arena owning every agent's lifetime.

Slots are stable for the duration of a tick: the driver snapshots the slot
indices at tick start, agents that die mid-pass stay in their slot (and
are skipped) until ``compact`` runs after the pass, and newborns are only
added once the pass is over.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator

from ecosim.agent import Agent
from ecosim.species import Species


class Population:
    def __init__(self) -> None:
        self._slots: list[Agent] = []

    def add(self, agent: Agent) -> int:
        self._slots.append(agent)
        return len(self._slots) - 1

    def extend(self, agents: Iterable[Agent]) -> None:
        self._slots.extend(agents)

    def slots(self) -> list[int]:
        return list(range(len(self._slots)))

    def get(self, slot: int) -> Agent:
        return self._slots[slot]

    def compact(self) -> list[Agent]:
        """Drop dead agents, keeping survivors in order. Returns the dead."""
        dead = [a for a in self._slots if not a.alive]
        if dead:
            self._slots = [a for a in self._slots if a.alive]
        return dead

    def clear(self) -> None:
        self._slots.clear()

    def counts(self) -> Counter[Species]:
        return Counter(a.species for a in self._slots if a.alive)

    def __iter__(self) -> Iterator[Agent]:
        return (a for a in self._slots if a.alive)

    def __len__(self) -> int:
        return sum(1 for a in self._slots if a.alive)
