from synastry_api.services.chart_builder import build_chart
from synastry_api.services.models import AspectMatch, Location, Person, SynastryResult
from synastry_api.services.narratives import assembler
from synastry_api.services.narratives.rulebook import ADVICE, PAIR_TEXTS
from synastry_api.services.synastry_engine import build_synastry


def chart(name, lon, time_unknown=False):
    p = Person(
        name=name,
        birth_date="1995-05-05",
        birth_time=None if time_unknown else "10:00",
        location=Location(lat=0.0, lon=0.0),
    )
    return build_chart(p, tz_resolver=lambda lat, lon: "UTC", longitude_of=lambda body, utc: lon)


def test_mood_thresholds():
    assert assembler.mood_for(70) == "inspiring and supportive"
    assert assembler.mood_for(69) == "lively and dynamic"
    assert assembler.mood_for(50) == "lively and dynamic"
    assert assembler.mood_for(49) == "demanding attention and maturity"


def test_time_unknown_partner_gets_a_note():
    a, b = chart("Anna", 0.0), chart("Ilya", 0.0, time_unknown=True)
    out = assembler.interpret_synastry(a, b, build_synastry(a, b))

    assert len(out["notes"]) == 1
    assert "Ilya" in out["notes"][0]
    assert "100/100" in out["summary"]
    assert out["emotional"].endswith("warm and supportive.")


def test_element_summary_names_dominant_elements():
    a, b = chart("Anna", 0.0), chart("Ilya", 100.0)
    out = assembler.interpret_synastry(a, b, build_synastry(a, b))

    assert out["element_a"]["Fire"] == 100
    assert out["element_b"]["Water"] == 100
    assert out["element_summary"][0] == "Energy style: partner A is led by fire, partner B by water."
    assert out["aspect_story"] == []


def test_aspect_story_uses_pair_text_and_advice():
    syn = SynastryResult(
        aspects=(),
        harmony=52,
        top_aspects=(
            AspectMatch("Venus", "Mars", "conjunction", 1.0, 1.0, 3),
            AspectMatch("Sun", "Saturn", "square", 91.0, 1.0, -2),
            AspectMatch("Jupiter", "Pluto", "trine", 120.0, 0.0, 2),
            AspectMatch("Moon", "Mercury", "sextile", 60.0, 0.0, 1),
        ),
    )
    a, b = chart("Anna", 0.0), chart("Ilya", 30.0)
    story = assembler.interpret_synastry(a, b, syn)["aspect_story"]

    assert story[0]["title"] == "Venus — Conjunction — Mars"
    assert story[0]["text"] == PAIR_TEXTS["Mars-Venus"]
    assert story[0]["bullets"] == ADVICE["Venus"]
    assert story[1]["bullets"] == ADVICE["square"]
    assert story[2]["text"] == (
        "This aspect brings a natural flow and ease between the themes of "
        "growth and inspiration and depth and transformation."
    )
    assert story[2]["bullets"] == ADVICE["default"]
    assert story[3]["bullets"] == ADVICE["Mercury"]


def test_dominant_element_prefers_table_order_on_ties():
    assert assembler.dominant_element({"Fire": 30, "Earth": 30, "Air": 20, "Water": 20}) == "Fire"
