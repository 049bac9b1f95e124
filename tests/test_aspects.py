import pytest

from synastry_api.services import aspects


def test_angle_diff_wraps_across_zero():
    # 350° and 10° are 20° apart, not 340°
    assert aspects.angle_diff(350.0, 10.0) == 20.0
    assert aspects.angle_diff(0.0, 180.0) == 180.0


@pytest.mark.parametrize("a", [0.0, 45.5, 179.0, 210.0, 359.75])
@pytest.mark.parametrize("b", [0.0, 12.0, 180.0, 300.25])
def test_angle_diff_symmetric_and_bounded(a, b):
    d = aspects.angle_diff(a, b)
    assert d == aspects.angle_diff(b, a)
    assert 0.0 <= d <= 180.0


def test_definitions_keep_priority_order():
    assert [a.name for a in aspects.ASPECTS] == ["conjunction", "opposition", "trine", "square", "sextile"]
    assert aspects.ASPECTS[3].weight == -2


@pytest.mark.parametrize(
    "separation,expected",
    [
        (0.0, "conjunction"),
        (7.9, "conjunction"),
        (8.5, None),
        (175.0, "opposition"),
        (121.0, "trine"),
        (90.0, "square"),
        (57.0, "sextile"),
        (55.0, None),
        (30.0, None),
    ],
)
def test_aspect_for_separation(separation, expected):
    found = aspects.aspect_for_separation(separation)
    assert (found.name if found else None) == expected


def test_first_matching_definition_wins(monkeypatch):
    wide_square = aspects.AspectDefinition("square", 90, 40, -2)
    sextile = aspects.AspectDefinition("sextile", 60, 4, 1)
    monkeypatch.setattr(aspects, "ASPECTS", (wide_square, sextile))

    # 62° is tighter to the sextile, but the square is tested first
    assert aspects.aspect_for_separation(62.0) is wide_square

    monkeypatch.setattr(aspects, "ASPECTS", (sextile, wide_square))
    assert aspects.aspect_for_separation(62.0) is sextile
