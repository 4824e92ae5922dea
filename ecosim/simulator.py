"""Simulator - tick loop, population bookkeeping, seeding and migration."""
from __future__ import annotations

import logging
import time
from collections import Counter
from typing import Any, Callable

from ecosim.agent import Agent
from ecosim.clock import DayNightClock
from ecosim.config import SimulationConfig
from ecosim.grid import Grid
from ecosim.population import Population
from ecosim.random_source import make_random
from ecosim.species import CREATION_ORDER, TRAITS, Species
from ecosim.stats import SimulationStats
from ecosim.types import DeathCause, Location, Observer, RandomSource, ViabilityCheck
from ecosim.viability import predator_prey_viable

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1

Hook = Callable[["Simulator"], None]


class Simulator:
    def __init__(
        self,
        config: SimulationConfig | None = None,
        seed: int | None = None,
        rng: RandomSource | None = None,
        viability: ViabilityCheck | None = None,
        populate: bool = True,
    ) -> None:
        self._config = config if config is not None else SimulationConfig()
        self._config.validate()

        if rng is None:
            seed, rng = make_random(seed)
        self._seed = seed
        self._rng: RandomSource = rng

        self._grid = Grid(self._config.depth, self._config.width)
        self._clock = DayNightClock(self._config.cycle_length)
        self._population = Population()
        self._stats = SimulationStats()
        self._viability = viability if viability is not None else predator_prey_viable
        self._viable = False
        self._observers: list[Observer] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False

        self.reset(populate=populate)

    # -- Properties --

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def grid(self) -> Grid:
        return self._grid

    @property
    def clock(self) -> DayNightClock:
        return self._clock

    @property
    def population(self) -> Population:
        return self._population

    @property
    def stats(self) -> SimulationStats:
        return self._stats

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def tick_number(self) -> int:
        return self._clock.tick_number

    @property
    def cycle_progress(self) -> float:
        return self._clock.progress

    @property
    def viable(self) -> bool:
        return self._viable

    def counts(self) -> Counter[Species]:
        return self._population.counts()

    # -- Collaborators --

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        """Stop ``run`` after the current tick completes."""
        self._stop_requested = True

    def report_status(self) -> None:
        """Notify observers and re-evaluate viability for the current tick."""
        progress = self._clock.progress
        for observer in self._observers:
            observer(self._clock.tick_number, self._grid, progress, self._clock.cycle_length)
        self._check_viability()

    def _check_viability(self) -> bool:
        self._viable = bool(self._viability(self._grid, self.counts()))
        return self._viable

    # -- Setup --

    def spawn(
        self,
        species: Species,
        location: Location,
        *,
        random_age: bool = False,
        inherits_disease: bool = False,
    ) -> Agent:
        """Create an agent at ``location`` and add it to the population."""
        agent = Agent(
            species, self._grid, location, self._rng,
            random_age=random_age, inherits_disease=inherits_disease,
        )
        self._population.add(agent)
        return agent

    def _pick_species(self) -> Species | None:
        # A fresh draw per species test, stopping at the first success.
        for species in CREATION_ORDER:
            if self._rng.random() <= TRAITS[species].creation_probability:
                return species
        return None

    def populate(self) -> None:
        """Fill the grid row by row, at most one randomly aged agent per cell."""
        self._grid.clear_all()
        self._population.clear()
        for row in range(self._grid.depth):
            for col in range(self._grid.width):
                species = self._pick_species()
                if species is not None:
                    self.spawn(species, Location(row, col), random_age=True)

    def reset(self, populate: bool = True) -> None:
        self._clock.reset()
        self._stats.clear()
        self._grid.clear_all()
        self._population.clear()
        if populate:
            self.populate()
        logger.info(
            "simulation reset: %dx%d grid, %d agents",
            self._grid.depth, self._grid.width, len(self._population),
        )
        self.report_status()

    # -- Tick --

    def step(self) -> bool:
        """Advance one tick and return whether the ecosystem is still viable."""
        progress = self._clock.advance()

        newborns: list[Agent] = []
        for slot in self._population.slots():
            agent = self._population.get(slot)
            if agent.alive:
                agent.act(newborns, progress, self._rng)
        self._stats.record_deaths(self._population.compact())

        survivors = [a for a in newborns if a.alive]
        self._stats.record_births(newborns)
        self._stats.record_deaths(a for a in newborns if not a.alive)
        self._population.extend(survivors)

        self.report_status()
        self.introduce(progress)
        return self._viable

    advance_one_tick = step

    def introduce(self, cycle_progress: float) -> list[Agent]:
        """Spawn migrants at random cells once the day is far enough along.

        Migrants are placed without checking occupancy; a resident already
        on the chosen cell is removed as DISPLACED. A plain overwrite would
        leave that resident alive but off the grid, so it is killed instead.
        """
        config = self._config
        if not config.random_introduction or cycle_progress <= config.introduction_threshold:
            return []

        arrivals: list[Agent] = []
        for _ in range(config.introduction_attempts):
            location = Location(
                self._rng.randrange(self._grid.depth),
                self._rng.randrange(self._grid.width),
            )
            species = self._pick_species()
            if species is None:
                continue
            resident = self._grid.occupant_at(location)
            if isinstance(resident, Agent):
                resident.die(DeathCause.DISPLACED)
            arrivals.append(self.spawn(species, location, random_age=True))
            self._stats.introductions[species] += 1

        if arrivals:
            logger.debug(
                "tick %d: %d migrants introduced", self._clock.tick_number, len(arrivals),
            )
        return arrivals

    # -- Run loop --

    def run(self, n: int) -> int:
        """Run up to ``n`` ticks; stop early when no longer viable.

        Returns the number of ticks actually run.
        """
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)
        # Agents may have been spawned or killed since the last report.
        self._check_viability()

        ran = 0
        delay = self._config.delay
        while ran < n and self._viable and not self._stop_requested:
            self.step()
            ran += 1
            if delay > 0 and ran < n:
                time.sleep(delay)

        if not self._viable:
            logger.info(
                "ecosystem no longer viable at tick %d", self._clock.tick_number,
            )

        for hook in self._stop_hooks:
            hook(self)
        return ran

    def run_long(self) -> int:
        return self.run(self._config.long_run_length)

    # -- Inspection --

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "tick_number": self._clock.tick_number,
            "time_of_day": self._clock.time_of_day,
            "cycle_length": self._clock.cycle_length,
            "seed": self._seed,
            "agents": [agent.to_dict() for agent in self._population],
            "counts": {s.value: n for s, n in sorted(
                self.counts().items(), key=lambda item: item[0].value
            )},
        }
