from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AspectDefinition:
    name: str
    angle: float
    orb: float
    weight: int


# Checked in this order; the first definition within orb wins.
ASPECTS: tuple[AspectDefinition, ...] = (
    AspectDefinition("conjunction", 0, 8, 3),
    AspectDefinition("opposition", 180, 8, -2),
    AspectDefinition("trine", 120, 6, 2),
    AspectDefinition("square", 90, 6, -2),
    AspectDefinition("sextile", 60, 4, 1),
)


def angle_diff(a: float, b: float) -> float:
    """Return the minimal angular distance between two longitudes."""

    diff = abs(a - b) % 360.0
    if diff > 180.0:
        diff = 360.0 - diff
    return diff


def aspect_for_separation(separation: float) -> Optional[AspectDefinition]:
    for definition in ASPECTS:
        if abs(separation - definition.angle) <= definition.orb:
            return definition
    return None
