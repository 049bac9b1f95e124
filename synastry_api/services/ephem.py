"""Swiss Ephemeris helpers used by the chart builder."""

from __future__ import annotations

import os
from datetime import date, datetime, time, timezone
from typing import Callable, Dict, Union
from zoneinfo import ZoneInfo

import swisseph as swe

from .constants import normalize_angle
from .models import ChartInputError, ResolvedInstant


# Engine version for API responses
try:
    ENGINE_VERSION = f"swisseph-{swe.version}"
except AttributeError:
    ENGINE_VERSION = "swisseph-2.10"  # Fallback if version not available

# Display order of the charts
BODIES: Dict[str, int] = {
    "Sun": swe.SUN,
    "Moon": swe.MOON,
    "Mercury": swe.MERCURY,
    "Venus": swe.VENUS,
    "Mars": swe.MARS,
    "Jupiter": swe.JUPITER,
    "Saturn": swe.SATURN,
    "Uranus": swe.URANUS,
    "Neptune": swe.NEPTUNE,
    "Pluto": swe.PLUTO,
}

DEFAULT_TIME = "12:00"

LongitudeProvider = Callable[[str, datetime], float]


def _backend_flag() -> int:
    """Return the Swiss Ephemeris backend flag based on environment configuration."""

    raw_backend = os.getenv("EPHEMERIS_BACKEND")
    backend = raw_backend.strip().lower() if raw_backend else "swieph"
    return swe.FLG_MOSEPH if backend == "moseph" else swe.FLG_SWIEPH


def backend_name() -> str:
    return "moseph" if _backend_flag() == swe.FLG_MOSEPH else "swieph"


def init_paths(ephe_dir: str | os.PathLike[str] | None) -> None:
    """Set the Swiss Ephemeris file search path when available."""

    if not ephe_dir:
        return

    path = os.fspath(ephe_dir)
    if os.path.isdir(path):
        swe.set_ephe_path(path)


def parse_birth_date(value: Union[str, date, None]) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ChartInputError("birth date is required")
    try:
        return date.fromisoformat(value.strip())
    except ValueError as exc:
        raise ChartInputError(f"invalid birth date {value!r}; expected YYYY-MM-DD") from exc


def _naive_time(value: time) -> time:
    # local civil time comes from the resolved zone, never from the input
    if value.tzinfo is not None:
        raise ChartInputError(f"birth time {value.isoformat()} must not carry a UTC offset")
    return value


def parse_birth_time(value: Union[str, time, None]) -> time | None:
    """Return the civil time, or None when it is missing."""

    if value is None:
        return None
    if isinstance(value, time):
        return _naive_time(value)
    if not isinstance(value, str):
        raise ChartInputError(f"invalid birth time {value!r}; expected HH:MM")
    if not value.strip():
        return None
    try:
        parsed = time.fromisoformat(value.strip())
    except ValueError as exc:
        raise ChartInputError(f"invalid birth time {value!r}; expected HH:MM") from exc
    return _naive_time(parsed)


def resolve_instant(
    birth_date: Union[str, date],
    birth_time: Union[str, time, None],
    tz: str,
    is_time_unknown: bool = False,
) -> ResolvedInstant:
    """Interpret the birth date/time as local civil time in ``tz``.

    An unknown time is replaced by noon and the flag is carried on the
    result so house-dependent content can be suppressed downstream.
    """

    day = parse_birth_date(birth_date)
    civil = None if is_time_unknown else parse_birth_time(birth_time)
    if civil is None:
        is_time_unknown = True
        civil = time.fromisoformat(DEFAULT_TIME)

    dt_local = datetime.combine(day, civil).replace(tzinfo=ZoneInfo(tz))
    try:
        dt_utc = dt_local.astimezone(timezone.utc)
    except OverflowError as exc:
        raise ChartInputError(f"birth date {day.isoformat()} is out of the supported range") from exc
    return ResolvedInstant(
        utc=dt_utc,
        local=dt_local,
        used_time=civil.strftime("%H:%M"),
        is_time_unknown=is_time_unknown,
    )


def to_jd_utc(dt_utc: datetime) -> float:
    """Convert an aware UTC datetime to a Julian day."""

    dt_utc = dt_utc.astimezone(timezone.utc)
    hour = (
        dt_utc.hour
        + dt_utc.minute / 60
        + dt_utc.second / 3600
        + dt_utc.microsecond / 3_600_000_000
    )
    return swe.julday(dt_utc.year, dt_utc.month, dt_utc.day, hour, swe.GREG_CAL)


def longitude_of(body: str, dt_utc: datetime) -> float:
    """Geocentric apparent ecliptic longitude of ``body`` at ``dt_utc``."""

    code = BODIES[body]
    values, _ = swe.calc_ut(to_jd_utc(dt_utc), code, _backend_flag())
    return normalize_angle(values[0])


def body_longitudes(dt_utc: datetime, longitude_of: LongitudeProvider = longitude_of) -> Dict[str, float]:
    """Return normalized longitudes for every tracked body, in display order."""

    return {name: normalize_angle(longitude_of(name, dt_utc)) for name in BODIES}
