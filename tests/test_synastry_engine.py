from synastry_api.services import ephem
from synastry_api.services.chart_builder import build_chart
from synastry_api.services.models import AspectMatch, Location, Person
from synastry_api.services.synastry_engine import build_synastry, harmony_score, top_aspects

SPREAD = dict(zip(ephem.BODIES, [0.0, 45.0, 75.0, 100.0, 130.0, 160.0, 200.0, 250.0, 280.0, 350.0]))


def chart_at(lons):
    p = Person(name="x", birth_date="2000-01-01", birth_time="12:00", location=Location(lat=0.0, lon=0.0))
    return build_chart(p, tz_resolver=lambda lat, lon: "UTC", longitude_of=lambda body, utc: lons[body])


def all_at(lon):
    return {body: lon for body in ephem.BODIES}


def test_identical_charts_conjunct_on_the_diagonal():
    res = build_synastry(chart_at(SPREAD), chart_at(SPREAD))

    same = [m for m in res.aspects if m.a == m.b]
    assert len(same) == 10
    for m in same:
        assert (m.aspect, m.angle, m.orb, m.weight) == ("conjunction", 0.0, 0.0, 3)


def test_identical_charts_score_above_no_aspect_pair():
    together = build_synastry(chart_at(all_at(0.0)), chart_at(all_at(0.0)))
    apart = build_synastry(chart_at(all_at(0.0)), chart_at(all_at(30.0)))

    assert apart.aspects == ()
    assert apart.harmony == 50
    assert apart.top_aspects == ()
    assert together.harmony > apart.harmony
    assert together.harmony == 100


def test_exact_square_contributes_minus_four():
    a = dict(all_at(200.0), Sun=0.0)
    b = dict(all_at(230.0), Sun=90.0)
    res = build_synastry(chart_at(a), chart_at(b))

    assert [(m.a, m.b, m.aspect, m.angle, m.weight) for m in res.aspects] == [
        ("Sun", "Sun", "square", 90.0, -2)
    ]
    assert res.harmony == 46


def test_every_pair_is_evaluated_once():
    res = build_synastry(chart_at(all_at(0.0)), chart_at(all_at(0.0)))
    pairs = [(m.a, m.b) for m in res.aspects]
    assert len(pairs) == 100
    assert len(set(pairs)) == 100
    # chart A outer loop, chart B inner loop
    assert pairs[:3] == [("Sun", "Sun"), ("Sun", "Moon"), ("Sun", "Mercury")]
    assert pairs[10] == ("Moon", "Sun")


def test_top_aspects_tightest_first():
    b = {body: lon + 1.5 * i for i, (body, lon) in enumerate(SPREAD.items())}
    res = build_synastry(chart_at(SPREAD), chart_at(b))

    orbs = [abs(m.orb) for m in res.top_aspects]
    assert orbs == sorted(orbs)
    assert len(res.top_aspects) == min(8, len(res.aspects))
    assert res.top_aspects[0].orb == min(abs(m.orb) for m in res.aspects)


def test_top_aspects_ties_keep_enumeration_order():
    res = build_synastry(chart_at(all_at(0.0)), chart_at(all_at(0.0)))
    assert list(res.top_aspects) == list(res.aspects[:8])
    assert [m.b for m in res.top_aspects] == list(ephem.BODIES)[:8]


def test_top_aspects_shorter_than_limit():
    ms = [AspectMatch("Sun", "Moon", "trine", 121.0, 1.0, 2), AspectMatch("Sun", "Sun", "square", 90.5, 0.5, -2)]
    assert [m.orb for m in top_aspects(ms)] == [0.5, 1.0]


def test_harmony_is_clamped():
    square = AspectMatch("Sun", "Moon", "square", 90.0, 0.0, -2)
    trine = AspectMatch("Sun", "Moon", "trine", 120.0, 0.0, 2)
    assert harmony_score([]) == 50
    assert harmony_score([square] * 30) == 0
    assert harmony_score([trine] * 30) == 100
    assert harmony_score([trine, trine, square]) == 54
