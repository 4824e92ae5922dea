"""Random source factory and a scripted source for deterministic tests."""
from __future__ import annotations

import os
import random
from collections import deque
from typing import Iterable


def make_random(seed: int | None = None) -> tuple[int, random.Random]:
    """Return ``(seed, rng)``, drawing a fresh seed from the OS when omitted."""
    if seed is None:
        seed = int.from_bytes(os.urandom(8))
    return seed, random.Random(seed)


class ScriptedRandom:
    """Deterministic random source for testing.

    Conforms to the RandomSource protocol. Doubles and ints are served from
    their own queues in order; once a queue runs dry the matching default is
    returned instead.

    Args:
        doubles: Values returned by ``random()``, in order.
        ints: Values returned by ``randrange()``, in order. Each must lie in
            ``[0, stop)`` for the call that consumes it.
        default_double: Returned by ``random()`` after ``doubles`` is drained.
            The default of 0.999 makes every probability test fail.
        default_int: Returned by ``randrange()`` after ``ints`` is drained.
    """

    def __init__(
        self,
        doubles: Iterable[float] = (),
        ints: Iterable[int] = (),
        default_double: float = 0.999,
        default_int: int = 0,
    ) -> None:
        self._doubles = deque(doubles)
        self._ints = deque(ints)
        self._default_double = default_double
        self._default_int = default_int
        self.double_draws = 0
        self.int_draws = 0

    def random(self) -> float:
        self.double_draws += 1
        if self._doubles:
            return self._doubles.popleft()
        return self._default_double

    def randrange(self, stop: int) -> int:
        self.int_draws += 1
        value = self._ints.popleft() if self._ints else self._default_int
        if not 0 <= value < stop:
            raise ValueError(f"scripted int {value} outside [0, {stop})")
        return value

    def push_doubles(self, *values: float) -> None:
        self._doubles.extend(values)

    def push_ints(self, *values: int) -> None:
        self._ints.extend(values)
