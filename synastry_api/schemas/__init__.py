from .charts import LocationIn, PersonIn, PositionOut, ChartOut

from .synastry import (
    SynAspect,
    SynastryOut,
    ReportRequest,
    ReportResponse,
    CityOut,
    RegionOut,
    StatusOut,
)
