from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from functools import total_ordering

# -------- Units --------


class TimeUnit(str, Enum):
    NANOSECONDS = "nanoseconds"
    MICROSECONDS = "microseconds"
    MILLISECONDS = "milliseconds"
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    DAYS = "days"

    @property
    def nanos(self) -> int:
        return _NANOS_PER_UNIT[self]

    @property
    def abbreviation(self) -> str:
        return _ABBREVIATIONS[self]


_NANOS_PER_UNIT: dict[TimeUnit, int] = {
    TimeUnit.NANOSECONDS: 1,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MINUTES: 60 * 1_000_000_000,
    TimeUnit.HOURS: 3_600 * 1_000_000_000,
    TimeUnit.DAYS: 86_400 * 1_000_000_000,
}

_ABBREVIATIONS: dict[TimeUnit, str] = {
    TimeUnit.NANOSECONDS: "ns",
    TimeUnit.MICROSECONDS: "μs",
    TimeUnit.MILLISECONDS: "ms",
    TimeUnit.SECONDS: "s",
    TimeUnit.MINUTES: "m",
    TimeUnit.HOURS: "h",
    TimeUnit.DAYS: "d",
}


def _build_unit_names() -> dict[str, TimeUnit]:
    names: dict[str, TimeUnit] = {}
    for unit in TimeUnit:
        names[unit.abbreviation] = unit
        # plural ("seconds") and singular ("second")
        names[unit.value] = unit
        names[unit.value[:-1]] = unit
    names["us"] = TimeUnit.MICROSECONDS
    return names


UNIT_NAMES: dict[str, TimeUnit] = _build_unit_names()


def parse_time_unit(name: str) -> TimeUnit:
    """
    Resolve a unit name or abbreviation ("ms", "s", "minutes", "hour", ...).
    Case-insensitive. Raises ValueError for unknown names.
    """
    unit = UNIT_NAMES.get(name.lower())
    if unit is None:
        raise ValueError(f"Unknown time unit: {name!r}")
    return unit


# -------- Duration --------


@total_ordering
@dataclass(frozen=True, eq=False)
class Duration:
    """
    Immutable (magnitude, unit) pair.

    Equality, hashing and ordering compare the total length in nanoseconds,
    so Duration(5, SECONDS) == Duration(5000, MILLISECONDS).
    """

    magnitude: int
    unit: TimeUnit = TimeUnit.MILLISECONDS

    def __post_init__(self) -> None:
        if isinstance(self.magnitude, bool) or not isinstance(self.magnitude, int):
            raise TypeError(f"Duration magnitude must be an int, got {self.magnitude!r}")
        if not isinstance(self.unit, TimeUnit):
            raise TypeError(f"Duration unit must be a TimeUnit, got {self.unit!r}")

    @property
    def nanos(self) -> int:
        return self.magnitude * self.unit.nanos

    @property
    def is_zero_length(self) -> bool:
        return self.magnitude == 0

    def length(self, unit: TimeUnit) -> int:
        """Length expressed in `unit`, truncated toward zero."""
        nanos = self.nanos
        whole = abs(nanos) // unit.nanos
        return whole if nanos >= 0 else -whole

    def to_timedelta(self) -> timedelta:
        return timedelta(microseconds=self.length(TimeUnit.MICROSECONDS))

    def multiply(self, factor: int) -> Duration:
        if isinstance(factor, bool) or not isinstance(factor, int):
            raise TypeError(f"Duration can only be multiplied by an int, got {factor!r}")
        return Duration(self.magnitude * factor, self.unit)

    def _common_unit(self, other: Duration) -> TimeUnit:
        # the finer of the two units keeps the result exact
        return self.unit if self.unit.nanos <= other.unit.nanos else other.unit

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        unit = self._common_unit(other)
        return Duration((self.nanos + other.nanos) // unit.nanos, unit)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        unit = self._common_unit(other)
        return Duration((self.nanos - other.nanos) // unit.nanos, unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos == other.nanos

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanos < other.nanos

    def __hash__(self) -> int:
        return hash(self.nanos)

    def __str__(self) -> str:
        return f"{self.magnitude} {self.unit.abbreviation}"
