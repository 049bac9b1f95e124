from typing import Iterable, List, Sequence

from .aspects import angle_diff, aspect_for_separation
from .constants import round_half_up
from .models import AspectMatch, Chart, SynastryResult

TOP_ASPECTS = 8


def find_synastry_aspects(chart_a: Chart, chart_b: Chart) -> List[AspectMatch]:
    res = []
    for a in chart_a.positions:
        for b in chart_b.positions:
            d = angle_diff(a.lon, b.lon)
            definition = aspect_for_separation(d)
            if definition is None:
                continue
            res.append(
                AspectMatch(
                    a=a.body,
                    b=b.body,
                    aspect=definition.name,
                    angle=d,
                    orb=abs(d - definition.angle),
                    weight=definition.weight,
                )
            )
    return res


def harmony_score(aspects: Iterable[AspectMatch]) -> int:
    # 50 is neutral; every aspect moves the index by twice its weight
    total = sum(x.weight for x in aspects)
    return max(0, min(100, round_half_up(50 + total * 2)))


def top_aspects(aspects: Sequence[AspectMatch], n: int = TOP_ASPECTS) -> List[AspectMatch]:
    # sorted() is stable, so ties keep the A-outer/B-inner enumeration order
    return sorted(aspects, key=lambda x: abs(x.orb))[:n]


def build_synastry(chart_a: Chart, chart_b: Chart, *, top_n: int = TOP_ASPECTS) -> SynastryResult:
    aspects = find_synastry_aspects(chart_a, chart_b)
    return SynastryResult(
        aspects=tuple(aspects),
        harmony=harmony_score(aspects),
        top_aspects=tuple(top_aspects(aspects, top_n)),
    )
