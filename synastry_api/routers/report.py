import logging
import os
from dataclasses import asdict
from functools import lru_cache

from fastapi import APIRouter, Body, HTTPException, Query

from ..schemas import (
    ChartOut,
    CityOut,
    PersonIn,
    RegionOut,
    ReportRequest,
    ReportResponse,
    StatusOut,
    SynastryOut,
)
from ..services import ephem
from ..services.cities import find_city, list_cities_by_region, list_regions, load_cities
from ..services.chart_builder import build_chart
from ..services.models import ChartInputError
from ..services.narratives.assembler import interpret_synastry
from ..services.synastry_engine import build_synastry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["report"])


@lru_cache(maxsize=1)
def city_directory():
    return load_cities()


def _enrich_location(person: PersonIn) -> PersonIn:
    cities, _ = city_directory()
    loc = person.location
    match = find_city(cities, loc.region, loc.city)
    if match is None:
        return person
    return person.model_copy(update={"location": loc.model_copy(update={"lat": match.lat, "lon": match.lon})})


@router.get("/status", response_model=StatusOut)
def status():
    cities, error = city_directory()
    return StatusOut(
        ok=True, cities_loaded=len(cities), cities_error=error, ephemeris_backend=ephem.backend_name()
    )


@router.get("/regions", response_model=list[RegionOut])
def regions():
    cities, error = city_directory()
    if error:
        raise HTTPException(status_code=500, detail=error)
    return list_regions(cities)


@router.get("/cities", response_model=list[CityOut])
def cities(region: str | None = Query(None)):
    directory, error = city_directory()
    if error:
        raise HTTPException(status_code=500, detail=error)
    if not region:
        raise HTTPException(status_code=400, detail="region is required")
    return [CityOut(**asdict(c)) for c in list_cities_by_region(directory, region)]


@router.post("/report", response_model=ReportResponse)
def report(
    req: ReportRequest = Body(
        ...,
        example={
            "partner_a": {
                "name": "Anna",
                "birth_date": "1990-08-18",
                "birth_time": "14:32",
                "location": {"lat": 55.7558, "lon": 37.6173, "city": "Moscow", "region": "Moscow"},
            },
            "partner_b": {
                "name": "Ilya",
                "birth_date": "1991-03-07",
                "is_time_unknown": True,
                "location": {"lat": 59.9343, "lon": 30.3351},
            },
        },
    )
):
    ephem.init_paths(os.getenv("EPHEMERIS_DIR"))

    partners = []
    for label, person in (("A", req.partner_a), ("B", req.partner_b)):
        enriched = _enrich_location(person)
        if enriched.location.lat is None or enriched.location.lon is None:
            logger.info("report_location_unresolved", extra={"partner": label})
            raise HTTPException(status_code=400, detail=f"Could not resolve coordinates for partner {label}")
        partners.append(enriched.to_person())

    try:
        chart_a = build_chart(partners[0])
        chart_b = build_chart(partners[1])
    except ChartInputError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    syn = build_synastry(chart_a, chart_b)
    return ReportResponse(
        brand=os.getenv("BRAND_NAME", "Synastry"),
        engine_version=ephem.ENGINE_VERSION,
        chart_a=ChartOut.from_chart(chart_a),
        chart_b=ChartOut.from_chart(chart_b),
        synastry=SynastryOut.from_result(syn),
        narrative=interpret_synastry(chart_a, chart_b, syn),
    )
