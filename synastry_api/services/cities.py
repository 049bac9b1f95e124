"""City directory used to fill in birth-place coordinates."""

from __future__ import annotations

import json
import logging
import math
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_CITIES_PATH = "data/cities.json"

_NAME_KEYS = ("name", "city", "title", "name_ru", "nameRU", "city_name", "cityName")
_REGION_KEYS = ("region", "subject", "federalSubject", "region_name", "regionName", "province", "admin_name")
_LAT_KEYS = ("lat", "latitude", "geo_lat", "lat_dd")
_LON_KEYS = ("lon", "lng", "longitude", "geo_lon", "lon_dd")
_POP_KEYS = ("population", "pop", "population_count")


@dataclass(frozen=True)
class City:
    name: str
    region: str
    lat: float
    lon: float
    population: Optional[int] = None


def _first(raw: Dict[str, Any], keys: Tuple[str, ...]) -> Any:
    for key in keys:
        value = raw.get(key)
        if value not in (None, ""):
            return value
    return None


def _number(value: Any) -> Optional[float]:
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def normalize_city(raw: Any) -> Optional[City]:
    """Map a heterogeneous city record onto ``City``; None when unusable."""

    if not isinstance(raw, dict):
        return None
    coords = raw.get("coords") if isinstance(raw.get("coords"), dict) else {}
    name = _first(raw, _NAME_KEYS)
    region = _first(raw, _REGION_KEYS)
    lat = _first(raw, _LAT_KEYS)
    lon = _first(raw, _LON_KEYS)
    lat = _number(coords.get("lat") if lat is None else lat)
    lon = _number(coords.get("lon") if lon is None else lon)
    if not name or not region or lat is None or lon is None:
        return None
    pop = _number(_first(raw, _POP_KEYS))
    return City(
        name=str(name).strip(),
        region=str(region).strip(),
        lat=lat,
        lon=lon,
        population=int(pop) if pop is not None else None,
    )


def load_cities(path: str | os.PathLike[str] | None = None) -> Tuple[List[City], Optional[str]]:
    """Load the directory; a missing file is reported, not raised."""

    fp = Path(path or os.getenv("CITIES_PATH", DEFAULT_CITIES_PATH))
    if not fp.exists():
        logger.warning("cities_file_missing", extra={"path": str(fp)})
        return [], f"Cities file not found: {fp}"

    raw = json.loads(fp.read_text(encoding="utf-8"))
    if isinstance(raw, list):
        items = raw
    elif isinstance(raw, dict):
        items = raw.get("cities") or raw.get("items") or raw.get("data") or []
    else:
        items = []
    cities = [c for c in (normalize_city(r) for r in items) if c is not None]
    return cities, None


def list_regions(cities: List[City]) -> List[Dict[str, Any]]:
    counts: Dict[str, int] = {}
    for c in cities:
        counts[c.region] = counts.get(c.region, 0) + 1
    return [{"name": name, "count": counts[name]} for name in sorted(counts)]


def list_cities_by_region(cities: List[City], region: str) -> List[City]:
    # unknown population sorts after every known one
    return sorted(
        (c for c in cities if c.region == region),
        key=lambda c: (-(c.population if c.population is not None else -1), c.name),
    )


def find_city(cities: List[City], region: Optional[str], name: Optional[str]) -> Optional[City]:
    for c in cities:
        if c.region == region and c.name == name:
            return c
    return None
