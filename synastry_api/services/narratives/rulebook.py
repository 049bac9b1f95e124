"""Static rulebook snippets for synastry narratives."""

BODY_LABELS = {
    "Sun": "Sun",
    "Moon": "Moon",
    "Mercury": "Mercury",
    "Venus": "Venus",
    "Mars": "Mars",
    "Jupiter": "Jupiter",
    "Saturn": "Saturn",
    "Uranus": "Uranus",
    "Neptune": "Neptune",
    "Pluto": "Pluto",
}

ASPECT_LABELS = {
    "conjunction": "Conjunction",
    "opposition": "Opposition",
    "trine": "Trine",
    "square": "Square",
    "sextile": "Sextile",
}

PLANET_THEMES = {
    "Sun": "identity and vitality",
    "Moon": "emotions and a sense of safety",
    "Mercury": "thinking and communication",
    "Venus": "love and values",
    "Mars": "initiative and passion",
    "Jupiter": "growth and inspiration",
    "Saturn": "responsibility and boundaries",
    "Uranus": "freedom and change",
    "Neptune": "dreams and intuition",
    "Pluto": "depth and transformation",
}

ASPECT_TONES = {
    "conjunction": "a strong pull and a feeling of unity",
    "trine": "a natural flow and ease",
    "sextile": "gentle support and cooperation",
    "square": "tension that asks to be lived consciously",
    "opposition": "a polarity that teaches balance",
}
DEFAULT_TONE = "a meaningful dynamic"

# Keyed by the alphabetically sorted body pair
PAIR_TEXTS = {
    "Mercury-Sun": "The bond highlights a wish to be heard and understood: thoughts and sense of self start to sound in unison.",
    "Mercury-Venus": "Warm words, compliments and aesthetics become the language of your closeness.",
    "Mercury-Moon": "Conversations here are about feelings. Leave room for vulnerability and softness.",
    "Mars-Venus": "This is spark and attraction: romance easily turns into passion when you pay attention to each other.",
    "Moon-Sun": "The classic link of 'me and us': a sense of home and identity become the backbone of the union.",
    "Jupiter-Saturn": "A balance between growth and responsibility. This aspect helps build something lasting.",
    "Mars-Saturn": "Maturity and patience matter: the energy needs form and boundaries.",
    "Uranus-Venus": "Freedom and the unconventional in love: the relationship thrives when there is space.",
    "Moon-Neptune": "Strong empathy and intuition. Clear agreements keep you from dissolving into each other.",
    "Pluto-Venus": "Deep transformation through love. Avoid sliding into control and fear.",
}

ADVICE = {
    "square": [
        "Notice triggers early and take a pause.",
        "Agree on boundaries and on how to support each other.",
        "Turn an argument into 'us against the problem'.",
    ],
    "opposition": [
        "Look for balance between different needs.",
        "See your differences as a resource.",
        "Give each other the right to be 'not like me'.",
    ],
    "Mercury": [
        "Agree on the rules of communication in advance.",
        "Paraphrase what you heard to avoid mistakes.",
        "Use gentle wording.",
    ],
    "Venus": [
        "Acknowledge each other's values.",
        "Keep romance alive in the small things.",
        "Create shared symbols for the two of you.",
    ],
    "Mars": [
        "Channel energy into shared activities.",
        "Soften sharpness in disagreements.",
        "Celebrate your partner's strengths.",
    ],
    "default": [
        "Note what in this aspect helps you feel connected.",
        "Mind the tone of your conversations; it matters more than being right.",
        "Create small shared rituals.",
    ],
}

STRENGTHS = [
    "A quick feeling of 'my person' and a wish to support each other.",
    "A natural pull toward shared plans and inspiring conversations.",
    "Good potential to harmonise everyday life through clear agreements.",
]

GROWTH = [
    "Protect personal boundaries and keep expectations within your partner's means.",
    "Tense aspects are better lived through honest dialogue than through silence.",
    "Add rituals of care to the relationship; they strengthen stability.",
]

ADVICE_GENERAL = [
    "Plan shared 'points of joy' at least once a week.",
    "Listen without giving advice when all that is needed is contact.",
    "Leave room for personal space; it strengthens trust.",
]

TIME_UNKNOWN_NOTE = "Birth time of {name} is unknown, so houses and the ascendant were skipped."

COMPATIBILITY_SNIPPETS = {
    "summary": (
        "This is a {mood} connection with a harmony index of {score}/100. Your strengths show "
        "through emotional closeness, an exchange of ideas and shared values."
    ),
    "intimacy": "Intimacy unfolds through trust and a careful attitude toward each other's vulnerabilities.",
    "communication": "Your conversations deepen when you talk not only about facts but also about feelings.",
    "values": "The couple's values are stronger when you agree on goals and each person's role in advance.",
    "elements": "The elemental balance shows in which states it is easiest for you to find a shared rhythm.",
}
