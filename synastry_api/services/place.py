"""Helpers for validating birth places and resolving their timezone."""

import logging
import math
import os
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from timezonefinder import TimezoneFinder

from .models import ChartInputError

logger = logging.getLogger(__name__)

DEF_TZ = os.getenv("DEFAULT_PLACE_TZ", "UTC")

_TF = None


def _finder() -> TimezoneFinder:
    global _TF
    if _TF is None:
        _TF = TimezoneFinder()
    return _TF


def validate_coordinates(lat: Any, lon: Any) -> tuple[float, float]:
    """Return the coordinates as floats or raise ``ChartInputError``."""

    out = []
    for label, value in (("latitude", lat), ("longitude", lon)):
        if value is None or isinstance(value, bool):
            raise ChartInputError(f"{label} is required")
        try:
            value = float(value)
        except (TypeError, ValueError) as exc:
            raise ChartInputError(f"{label} must be a number, got {value!r}") from exc
        if not math.isfinite(value):
            raise ChartInputError(f"{label} must be finite, got {value!r}")
        out.append(value)
    return out[0], out[1]


def resolve_tz(lat: float, lon: float) -> str:
    """Infer the timezone name for a coordinate pair.

    Never raises: out-of-range or unmapped coordinates fall back to the
    default zone so the chart can still be computed approximately.
    """

    try:
        tz = _finder().timezone_at(lng=lon, lat=lat)
    except ValueError:
        logger.warning("tz_lookup_failed", extra={"lat": lat, "lon": lon, "reason": "out_of_range"})
        return DEF_TZ
    if not tz:
        logger.warning("tz_lookup_failed", extra={"lat": lat, "lon": lon, "reason": "unmapped"})
        return DEF_TZ
    try:
        ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("tz_lookup_failed", extra={"lat": lat, "lon": lon, "reason": "unknown_zone", "tz": tz})
        return DEF_TZ
    return tz
