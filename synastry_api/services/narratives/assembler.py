"""Assemble synastry narrative blocks from rulebook snippets."""
from typing import Any, Dict, List, Mapping

from ..models import AspectMatch, Chart, SynastryResult
from .rulebook import (
    ADVICE,
    ADVICE_GENERAL,
    ASPECT_LABELS,
    ASPECT_TONES,
    BODY_LABELS,
    COMPATIBILITY_SNIPPETS,
    DEFAULT_TONE,
    GROWTH,
    PAIR_TEXTS,
    PLANET_THEMES,
    STRENGTHS,
    TIME_UNKNOWN_NOTE,
)


def mood_for(score: int) -> str:
    if score >= 70:
        return "inspiring and supportive"
    if score >= 50:
        return "lively and dynamic"
    return "demanding attention and maturity"


def pair_key(a: str, b: str) -> str:
    return "-".join(sorted((a, b)))


def dominant_element(percent: Mapping[str, int]) -> str:
    # max() keeps the first of equal counts, i.e. element table order
    return max(percent, key=lambda k: percent[k])


def aspect_advice(aspect: str, a: str, b: str) -> List[str]:
    if aspect in ("square", "opposition"):
        return list(ADVICE[aspect])
    for body in ("Mercury", "Venus", "Mars"):
        if body in (a, b):
            return list(ADVICE[body])
    return list(ADVICE["default"])


def aspect_story(match: AspectMatch) -> Dict[str, Any]:
    text = PAIR_TEXTS.get(pair_key(match.a, match.b))
    if text is None:
        tone = ASPECT_TONES.get(match.aspect, DEFAULT_TONE)
        text = (
            f"This aspect brings {tone} between the themes of "
            f"{PLANET_THEMES[match.a]} and {PLANET_THEMES[match.b]}."
        )
    return {
        "title": f"{BODY_LABELS[match.a]} — {ASPECT_LABELS.get(match.aspect, match.aspect)} — {BODY_LABELS[match.b]}",
        "text": text,
        "bullets": aspect_advice(match.aspect, match.a, match.b),
    }


def interpret_synastry(chart_a: Chart, chart_b: Chart, synastry: SynastryResult) -> Dict[str, Any]:
    score = synastry.harmony
    mood = mood_for(score)

    notes = [
        TIME_UNKNOWN_NOTE.format(name=chart.person.name or label)
        for label, chart in (("partner A", chart_a), ("partner B", chart_b))
        if chart.is_time_unknown
    ]

    top_a = dominant_element(chart_a.element_percent)
    top_b = dominant_element(chart_b.element_percent)

    return {
        "summary": COMPATIBILITY_SNIPPETS["summary"].format(mood=mood, score=score),
        "mood": mood,
        "strengths": list(STRENGTHS),
        "growth": list(GROWTH),
        "emotional": "Emotional compatibility feels {}.".format(
            "warm and supportive" if score >= 60 else "changeable and in need of flexibility"
        ),
        "intimacy": COMPATIBILITY_SNIPPETS["intimacy"],
        "communication": COMPATIBILITY_SNIPPETS["communication"],
        "values": COMPATIBILITY_SNIPPETS["values"],
        "advice": list(ADVICE_GENERAL),
        "notes": notes,
        "element_a": dict(chart_a.element_percent),
        "element_b": dict(chart_b.element_percent),
        "element_summary": [
            f"Energy style: partner A is led by {top_a.lower()}, partner B by {top_b.lower()}.",
            COMPATIBILITY_SNIPPETS["elements"],
        ],
        "aspect_story": [aspect_story(m) for m in synastry.top_aspects],
    }
