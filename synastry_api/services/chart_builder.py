from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable

from . import ephem
from .constants import ELEMENT_NAMES, element_from_lon, fmt_deg, round_half_up, sign_name_from_lon
from .models import Chart, Person, Position
from .place import resolve_tz, validate_coordinates

logger = logging.getLogger(__name__)


def build_element_balance(positions: Iterable[Position]) -> Dict[str, int]:
    balance = {name: 0 for name in ELEMENT_NAMES}
    for p in positions:
        balance[p.element] = balance.get(p.element, 0) + 1
    return balance


def balance_to_percent(balance: Dict[str, int]) -> Dict[str, int]:
    total = sum(balance.values()) or 1
    return {k: round_half_up(v / total * 100) for k, v in balance.items()}


def position_from_lon(body: str, lon: float) -> Position:
    return Position(
        body=body,
        lon=lon,
        sign=sign_name_from_lon(lon),
        element=element_from_lon(lon),
        formatted=fmt_deg(lon),
    )


def build_chart(
    person: Person,
    *,
    tz_resolver: Callable[[float, float], str] = resolve_tz,
    longitude_of: ephem.LongitudeProvider = ephem.longitude_of,
) -> Chart:
    """Resolve the birth instant of ``person`` and classify every body."""

    lat, lon = validate_coordinates(person.location.lat, person.location.lon)
    tz = tz_resolver(lat, lon)
    instant = ephem.resolve_instant(
        person.birth_date, person.birth_time, tz, is_time_unknown=person.is_time_unknown
    )

    longitudes = ephem.body_longitudes(instant.utc, longitude_of=longitude_of)
    positions = tuple(position_from_lon(body, body_lon) for body, body_lon in longitudes.items())

    balance = build_element_balance(positions)
    logger.debug(
        "chart_built",
        extra={"tz": tz, "used_time": instant.used_time, "time_unknown": instant.is_time_unknown},
    )
    return Chart(
        person=person,
        tz=tz,
        instant=instant,
        positions=positions,
        element_balance=balance,
        element_percent=balance_to_percent(balance),
    )
