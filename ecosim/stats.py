"""Running totals of births, migrations and deaths."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Iterable

from ecosim.agent import Agent
from ecosim.species import Species
from ecosim.types import DeathCause


@dataclass
class SimulationStats:
    births: Counter[Species] = field(default_factory=Counter)
    introductions: Counter[Species] = field(default_factory=Counter)
    deaths: Counter[tuple[Species, DeathCause]] = field(default_factory=Counter)

    def record_births(self, agents: Iterable[Agent]) -> None:
        for agent in agents:
            self.births[agent.species] += 1

    def record_deaths(self, agents: Iterable[Agent]) -> None:
        for agent in agents:
            if agent.death_cause is not None:
                self.deaths[(agent.species, agent.death_cause)] += 1

    def deaths_by_cause(self) -> Counter[DeathCause]:
        totals: Counter[DeathCause] = Counter()
        for (_, cause), n in self.deaths.items():
            totals[cause] += n
        return totals

    def clear(self) -> None:
        self.births.clear()
        self.introductions.clear()
        self.deaths.clear()

    def to_dict(self) -> dict[str, Any]:
        return {
            "births": {s.value: n for s, n in self.births.items()},
            "introductions": {s.value: n for s, n in self.introductions.items()},
            "deaths": {
                f"{s.value}:{c.value}": n for (s, c), n in self.deaths.items()
            },
        }
