"""Agent - one creature on the grid and its per-tick state machine.

Every species shares the same machine: age, disease, sleep, then (when
awake) breed and hunt or wander. What differs between species lives in
the ``Traits`` table, so a single class covers all five of them.
"""
from __future__ import annotations

from typing import Any

from ecosim import disease
from ecosim.disease import Infection
from ecosim.grid import Grid
from ecosim.species import TRAITS, Species, Traits
from ecosim.types import DeathCause, InvariantViolation, Location, RandomSource, Sex

# Width of the cycle-progress window in which sleep can begin.
SLEEP_THRESHOLD = 0.05


class Agent:
    def __init__(
        self,
        species: Species,
        grid: Grid,
        location: Location,
        rng: RandomSource,
        *,
        random_age: bool = False,
        inherits_disease: bool = False,
    ) -> None:
        self.species = species
        self.traits: Traits = TRAITS[species]
        self.alive = True
        self.death_cause: DeathCause | None = None
        self._grid: Grid | None = grid
        self._location: Location | None = None
        self.relocate(location)

        self.sex = Sex.MALE if rng.randrange(2) == 1 else Sex.FEMALE
        self.infection = disease.inherit(inherits_disease, rng)
        self.asleep = False
        self.wake_up_age = 0

        if random_age:
            self.age = rng.randrange(self.traits.max_age)
            self.food_level = (
                rng.randrange(self.traits.full_food) if self.traits.hunts else 0
            )
        else:
            self.age = 0
            self.food_level = self.traits.full_food

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return f"<Agent {self.species.value} {self.sex.value} age={self.age} {state} at {self._location}>"

    # -- Placement --

    @property
    def location(self) -> Location:
        if self._location is None:
            raise InvariantViolation(f"{self!r} has no location")
        return self._location

    @property
    def grid(self) -> Grid:
        if self._grid is None:
            raise InvariantViolation(f"{self!r} is not on a grid")
        return self._grid

    def relocate(self, location: Location) -> None:
        grid = self.grid
        if self._location is not None:
            grid.clear(self._location)
        self._location = location
        grid.place(self, location)

    def die(self, cause: DeathCause) -> None:
        """Mark dead and leave the grid. Later calls are no-ops."""
        if not self.alive:
            return
        self.alive = False
        self.death_cause = cause
        if self._location is not None and self._grid is not None:
            if self._grid.occupant_at(self._location) is self:
                self._grid.clear(self._location)
        self._location = None
        self._grid = None

    @property
    def diseased(self) -> bool:
        return self.infection.diseased

    # -- Per-tick behaviour --

    def act(self, newborns: list[Agent], cycle_progress: float, rng: RandomSource) -> None:
        if not self.alive:
            return

        self._increment_age()
        disease.disease_tick(self, rng)
        if not self.alive:
            return

        self._update_sleep(cycle_progress)
        if self.asleep:
            if self.traits.starves_while_asleep:
                self._increment_hunger()
            return

        self._give_birth(newborns, rng)
        target = self._find_food() if self.traits.hunts else None
        if target is None:
            target = self.grid.free_adjacent_location(self.location)
        if target is None:
            self.die(DeathCause.OVERCROWDING)
            return
        self.relocate(target)

        if self.traits.hunts:
            self._increment_hunger()

    def _increment_age(self) -> None:
        self.age += 1
        if self.age > self.traits.max_age:
            self.die(DeathCause.OLD_AGE)

    def _increment_hunger(self) -> None:
        self.food_level -= 1
        if self.food_level <= 0:
            self.die(DeathCause.STARVATION)

    def _update_sleep(self, cycle_progress: float) -> None:
        start = self.traits.sleep_start
        if not self.asleep and start <= cycle_progress < start + SLEEP_THRESHOLD:
            self.asleep = True
            self.wake_up_age = self.age + self.traits.sleep_length
        if self.asleep and self.age == self.wake_up_age:
            self.asleep = False

    # -- Breeding --

    def has_mate(self) -> bool:
        grid = self.grid
        for loc in grid.adjacent_locations(self.location):
            other = grid.occupant_at(loc)
            if (
                isinstance(other, Agent)
                and other.alive
                and other.species is self.species
                and other.sex is not self.sex
            ):
                return True
        return False

    def can_breed(self) -> bool:
        return self.age >= self.traits.breeding_age and self.has_mate()

    def _breed(self, rng: RandomSource) -> int:
        if self.can_breed() and rng.random() <= self.traits.breeding_probability:
            return rng.randrange(self.traits.max_litter_size) + 1
        return 0

    def _give_birth(self, newborns: list[Agent], rng: RandomSource) -> None:
        grid = self.grid
        free = grid.free_adjacent_locations(self.location)
        births = self._breed(rng)
        for loc in free[:births]:
            young = Agent(
                self.species, grid, loc, rng, inherits_disease=self.diseased,
            )
            newborns.append(young)

    # -- Hunting --

    def _find_food(self) -> Location | None:
        """Eat the first live prey in adjacency order and return its cell."""
        grid = self.grid
        for loc in grid.adjacent_locations(self.location):
            other = grid.occupant_at(loc)
            if not isinstance(other, Agent) or not other.alive:
                continue
            value = self.traits.food_value(other.species)
            if value is None:
                continue
            other.die(DeathCause.EATEN)
            self.food_level = max(self.food_level, value)
            return loc
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "species": self.species.value,
            "sex": self.sex.value,
            "alive": self.alive,
            "location": (
                None if self._location is None
                else [self._location.row, self._location.col]
            ),
            "age": self.age,
            "food_level": self.food_level,
            "asleep": self.asleep,
            "wake_up_age": self.wake_up_age,
            "disease_ticks_remaining": self.infection.ticks_remaining,
        }
