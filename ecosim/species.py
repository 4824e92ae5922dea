"""Fixed species roster and per-species trait table."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Species(Enum):
    HEDGEHOG = "hedgehog"
    SNAKE = "snake"
    FROG = "frog"
    BIRD = "bird"
    COYOTE = "coyote"


@dataclass(frozen=True)
class Traits:
    """Constant parameters shared by every agent of one species.

    Attributes:
        breeding_age: Minimum age before an agent may breed.
        max_age: Agents older than this die of old age.
        breeding_probability: Chance per awake tick that a mated agent breeds.
        max_litter_size: Upper bound (inclusive) on births per breeding.
        sleep_start: Cycle progress at which the species falls asleep.
        sleep_length: Ticks spent asleep once asleep.
        prey: Ordered ``(species, food_value)`` pairs this species hunts.
        starves_while_asleep: Whether hunger keeps ticking during sleep.
        creation_probability: Per-cell chance used by seeding and migration.
    """

    breeding_age: int
    max_age: int
    breeding_probability: float
    max_litter_size: int
    sleep_start: float
    sleep_length: int
    creation_probability: float
    prey: tuple[tuple[Species, int], ...] = ()
    starves_while_asleep: bool = False

    @property
    def hunts(self) -> bool:
        return bool(self.prey)

    @property
    def full_food(self) -> int:
        """Food level of a newborn hunter: the value of its first prey."""
        return self.prey[0][1] if self.prey else 0

    def food_value(self, species: Species) -> int | None:
        for kind, value in self.prey:
            if kind is species:
                return value
        return None


TRAITS: dict[Species, Traits] = {
    Species.HEDGEHOG: Traits(
        breeding_age=4, max_age=40, breeding_probability=0.40,
        max_litter_size=10, sleep_start=0.50, sleep_length=20,
        creation_probability=0.1,
    ),
    Species.FROG: Traits(
        breeding_age=10, max_age=40, breeding_probability=0.35,
        max_litter_size=5, sleep_start=0.70, sleep_length=20,
        creation_probability=0.018,
    ),
    Species.SNAKE: Traits(
        breeding_age=30, max_age=100, breeding_probability=0.33,
        max_litter_size=20, sleep_start=0.15, sleep_length=30,
        creation_probability=0.03,
        prey=((Species.HEDGEHOG, 9),),
    ),
    Species.BIRD: Traits(
        breeding_age=20, max_age=150, breeding_probability=0.55,
        max_litter_size=10, sleep_start=0.60, sleep_length=35,
        creation_probability=0.04,
        prey=((Species.FROG, 11),),
        starves_while_asleep=True,
    ),
    Species.COYOTE: Traits(
        breeding_age=15, max_age=150, breeding_probability=0.27,
        max_litter_size=400, sleep_start=0.30, sleep_length=40,
        creation_probability=0.035,
        prey=((Species.HEDGEHOG, 9), (Species.BIRD, 11)),
        starves_while_asleep=True,
    ),
}

# Seeding and migration test species in this order; the first success wins.
CREATION_ORDER: tuple[Species, ...] = (
    Species.COYOTE,
    Species.HEDGEHOG,
    Species.SNAKE,
    Species.BIRD,
    Species.FROG,
)

PREDATORS = frozenset(s for s, t in TRAITS.items() if t.hunts)
PREY = frozenset(s for s, t in TRAITS.items() if not t.hunts)
