from pydantic import BaseModel
from typing import Optional, List, Dict

from ..services.models import Chart, Location, Person


class LocationIn(BaseModel):
    lat: Optional[float] = None
    lon: Optional[float] = None
    city: Optional[str] = None
    region: Optional[str] = None


class PersonIn(BaseModel):
    name: str = ""
    birth_date: str  # YYYY-MM-DD
    birth_time: Optional[str] = None  # HH:MM
    is_time_unknown: bool = False
    location: LocationIn

    def to_person(self) -> Person:
        loc = self.location
        return Person(
            name=self.name,
            birth_date=self.birth_date,
            birth_time=self.birth_time,
            is_time_unknown=self.is_time_unknown,
            location=Location(lat=loc.lat, lon=loc.lon, city=loc.city, region=loc.region),
        )


class PositionOut(BaseModel):
    body: str
    lon: float
    sign: str
    element: str
    formatted: str


class ChartOut(BaseModel):
    name: str
    tz: str
    utc: str
    local: str
    used_time: str
    is_time_unknown: bool
    positions: List[PositionOut]
    element_balance: Dict[str, int]
    element_percent: Dict[str, int]

    @classmethod
    def from_chart(cls, chart: Chart) -> "ChartOut":
        return cls(
            name=chart.person.name,
            tz=chart.tz,
            utc=chart.instant.utc.isoformat(),
            local=chart.instant.local.isoformat(),
            used_time=chart.used_time,
            is_time_unknown=chart.is_time_unknown,
            positions=[
                PositionOut(body=p.body, lon=round(p.lon, 4), sign=p.sign, element=p.element, formatted=p.formatted)
                for p in chart.positions
            ],
            element_balance=dict(chart.element_balance),
            element_percent=dict(chart.element_percent),
        )
