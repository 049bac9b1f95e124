"""Immutable records shared by the chart builder and the synastry engine."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Mapping, Optional, Tuple, Union


class ChartInputError(ValueError):
    """Raised when a person's birth data cannot be turned into a chart."""


@dataclass(frozen=True)
class Location:
    lat: float
    lon: float
    city: Optional[str] = None
    region: Optional[str] = None


@dataclass(frozen=True)
class Person:
    name: str
    birth_date: Union[str, date]
    location: Location
    birth_time: Union[str, time, None] = None
    is_time_unknown: bool = False


@dataclass(frozen=True)
class ResolvedInstant:
    """UTC instant handed to the ephemeris plus the civil time it came from."""
    utc: datetime
    local: datetime
    used_time: str  # "HH:MM"
    is_time_unknown: bool


@dataclass(frozen=True)
class Position:
    body: str
    lon: float
    sign: str
    element: str
    formatted: str


@dataclass(frozen=True)
class Chart:
    person: Person
    tz: str
    instant: ResolvedInstant
    positions: Tuple[Position, ...]
    element_balance: Mapping[str, int]
    element_percent: Mapping[str, int]

    @property
    def is_time_unknown(self) -> bool:
        """True when houses and the ascendant must not be interpreted."""
        return self.instant.is_time_unknown

    @property
    def used_time(self) -> str:
        return self.instant.used_time


@dataclass(frozen=True)
class AspectMatch:
    a: str
    b: str
    aspect: str
    angle: float  # raw separation, 0..180
    orb: float  # deviation from the exact aspect angle
    weight: int


@dataclass(frozen=True)
class SynastryResult:
    aspects: Tuple[AspectMatch, ...]
    harmony: int
    top_aspects: Tuple[AspectMatch, ...]
