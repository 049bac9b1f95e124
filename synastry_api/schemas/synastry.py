from pydantic import BaseModel
from typing import Optional, List, Dict, Any

from .charts import ChartOut, PersonIn
from ..services.models import AspectMatch, SynastryResult


class SynAspect(BaseModel):
    a: str
    b: str
    aspect: str
    angle: float
    orb: float
    weight: int

    @classmethod
    def from_match(cls, m: AspectMatch) -> "SynAspect":
        return cls(a=m.a, b=m.b, aspect=m.aspect, angle=round(m.angle, 4), orb=round(m.orb, 4), weight=m.weight)


class SynastryOut(BaseModel):
    aspects: List[SynAspect]
    harmony: int
    top_aspects: List[SynAspect]

    @classmethod
    def from_result(cls, res: SynastryResult) -> "SynastryOut":
        return cls(
            aspects=[SynAspect.from_match(m) for m in res.aspects],
            harmony=res.harmony,
            top_aspects=[SynAspect.from_match(m) for m in res.top_aspects],
        )


class ReportRequest(BaseModel):
    partner_a: PersonIn
    partner_b: PersonIn


class ReportResponse(BaseModel):
    brand: str
    engine_version: str
    chart_a: ChartOut
    chart_b: ChartOut
    synastry: SynastryOut
    narrative: Dict[str, Any]


class CityOut(BaseModel):
    name: str
    region: str
    lat: float
    lon: float
    population: Optional[int] = None


class RegionOut(BaseModel):
    name: str
    count: int


class StatusOut(BaseModel):
    ok: bool
    cities_loaded: int
    cities_error: Optional[str] = None
    ephemeris_backend: str
