import logging
import math

import pytest

from yieldcalc.errors import InvalidParameter
from yieldcalc.geometry import gross_die_count, efficiency, usable_radius


def test_gross_die_count_300mm_reference():
    """
    300 mm wafer, 100 mm² die, 3 mm edge exclusion:
    r = 147, pi*r²/100 = 678.87, edge loss = pi*294/sqrt(200) = 65.31 -> 613.
    """
    assert gross_die_count(300, 100, 3) == 613


def test_gross_die_count_formula_matches_closed_form():
    r = 200 / 2 - 5
    expected = math.floor(math.pi * r**2 / 50 - math.pi * 2 * r / math.sqrt(100))
    assert gross_die_count(200, 50, 5) == expected


@pytest.mark.parametrize("edge", [150, 150.5, 400])
def test_edge_exclusion_consuming_wafer_gives_zero(edge):
    total = gross_die_count(300, 100, edge)
    assert total == 0
    assert efficiency(total, 100, 300, edge) == 0.0


def test_tiny_wafer_never_goes_negative():
    # the edge correction outweighs the area term here
    assert gross_die_count(10, 100, 0) == 0


def test_larger_die_means_fewer_dies():
    assert gross_die_count(300, 200, 3) < gross_die_count(300, 100, 3) < gross_die_count(300, 20, 3)


def test_usable_radius_is_clamped():
    assert usable_radius(300, 3) == 147
    assert usable_radius(300, 200) == 0


@pytest.mark.parametrize("area", [0, -5])
def test_non_positive_die_area_rejected(area):
    with pytest.raises(InvalidParameter) as exc:
        gross_die_count(300, area, 3)
    assert exc.value.field == "die_area_mm2"


def test_negative_edge_exclusion_rejected():
    with pytest.raises(InvalidParameter):
        gross_die_count(300, 100, -1)


def test_efficiency_reference():
    eff = efficiency(613, 100, 300, 3)
    assert eff == pytest.approx(61300 / (math.pi * 150**2))


@pytest.mark.parametrize("diameter", [200, 300, 450])
@pytest.mark.parametrize("area", [1, 20, 100, 200, 800])
@pytest.mark.parametrize("edge", [0, 3, 10])
def test_efficiency_bounded_for_valid_geometry(diameter, area, edge):
    total = gross_die_count(diameter, area, edge)
    assert 0.0 <= efficiency(total, area, diameter, edge) <= 1.0


def test_efficiency_clamps_and_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="yieldcalc.geometry"):
        assert efficiency(10_000, 100, 300, 0) == 1.0
    assert "clamping efficiency" in caplog.text
