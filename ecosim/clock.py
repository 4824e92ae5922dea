"""DayNightClock - tick counter plus position in the day/night cycle."""

CYCLE_LENGTH = 500


class DayNightClock:
    def __init__(self, cycle_length: int = CYCLE_LENGTH) -> None:
        if cycle_length <= 0:
            raise ValueError("cycle_length must be positive")
        self._cycle_length = cycle_length
        self._tick_number = 0
        self._time_of_day = 0

    @property
    def cycle_length(self) -> int:
        return self._cycle_length

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def time_of_day(self) -> int:
        return self._time_of_day

    @property
    def progress(self) -> float:
        """Fraction of the current cycle elapsed, in ``[0, 1)``."""
        return self._time_of_day / self._cycle_length

    def advance(self) -> float:
        self._tick_number += 1
        self._time_of_day = (self._time_of_day + 1) % self._cycle_length
        return self.progress

    def reset(self, tick_number: int = 0, time_of_day: int = 0) -> None:
        self._tick_number = tick_number
        self._time_of_day = time_of_day % self._cycle_length
