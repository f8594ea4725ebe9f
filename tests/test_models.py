import dataclasses
import math

import pytest

from yieldcalc.enums import YieldModel, SweepAxis
from yieldcalc.errors import InvalidParameter
from yieldcalc.models import ProcessParameters, EconomicsInputs, SweepSpec


def test_defaults_are_valid():
    params = ProcessParameters()
    assert params.wafer_diameter_mm == 300
    assert params.model is YieldModel.POISSON
    econ = EconomicsInputs()
    assert econ.wafer_cost == 5000
    assert econ.fab_utilization_pct == 95


def test_parameters_are_immutable():
    params = ProcessParameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.defect_density_per_cm2 = 1.0


def test_replace_returns_new_value():
    params = ProcessParameters()
    updated = params.replace(defect_density_per_cm2=1.2)
    assert updated.defect_density_per_cm2 == 1.2
    assert params.defect_density_per_cm2 == 0.5
    assert updated != params
    assert params.replace() == params


def test_replace_revalidates():
    with pytest.raises(InvalidParameter):
        ProcessParameters().replace(pattern_density=1.5)


@pytest.mark.parametrize("value, expected", [
    ("poisson", YieldModel.POISSON),
    ("Murphy", YieldModel.MURPHY),
    ("nb", YieldModel.NEGATIVE_BINOMIAL),
    ("Neg. Binomial", YieldModel.NEGATIVE_BINOMIAL),
    ("negative_binomial", YieldModel.NEGATIVE_BINOMIAL),
])
def test_model_coerced_from_strings(value, expected):
    assert ProcessParameters(model=value).model is expected


def test_model_labels_and_descriptions():
    assert YieldModel.values() == ["poisson", "murphy", "nb"]
    assert YieldModel.NEGATIVE_BINOMIAL.label == "Neg. Binomial"
    assert "clustering" in YieldModel.NEGATIVE_BINOMIAL.description


@pytest.mark.parametrize("field, value", [
    ("wafer_diameter_mm", 150),
    ("wafer_diameter_mm", 200),
    ("wafer_diameter_mm", 451),
    ("die_area_mm2", 0),
    ("defect_density_per_cm2", -0.1),
    ("defect_density_per_cm2", math.nan),
    ("cluster_factor", 0),
    ("model", "seeds"),
    ("edge_exclusion_mm", -1),
    ("edge_exclusion_mm", 150),
    ("pattern_density", 1.01),
    ("process_maturity", -0.1),
    ("fab_utilization", 0),
    ("fab_utilization", 1.2),
])
def test_process_parameters_reject_out_of_domain(field, value):
    with pytest.raises(InvalidParameter) as exc:
        ProcessParameters(**{field: value})
    assert exc.value.field == field


def test_infinite_cluster_factor_allowed():
    assert ProcessParameters(cluster_factor=math.inf).cluster_factor == math.inf


def test_boundary_values_accepted():
    ProcessParameters(wafer_diameter_mm=450, pattern_density=0, process_maturity=1, fab_utilization=1)
    ProcessParameters(wafer_diameter_mm=200.5, edge_exclusion_mm=100.2)


def test_200mm_wafer_is_outside_the_domain():
    with pytest.raises(InvalidParameter, match=r"wafer_diameter_mm must be in \(200,450\], got 200"):
        ProcessParameters(wafer_diameter_mm=200)


@pytest.mark.parametrize("field, value", [
    ("wafer_cost", -1),
    ("repairable_area_fraction", 0.6),
    ("scribe_width_mm", -0.1),
    ("fab_utilization_pct", 49),
    ("fab_utilization_pct", 101),
    ("markup", -1),
])
def test_economics_inputs_reject_out_of_domain(field, value):
    with pytest.raises(InvalidParameter) as exc:
        EconomicsInputs(**{field: value})
    assert exc.value.field == field


def test_economics_override_optional():
    assert EconomicsInputs(fab_utilization_pct=None).fab_utilization_pct is None


def test_sweep_spec_validation():
    assert SweepSpec().axis is SweepAxis.DEFECT_DENSITY
    assert SweepSpec(axis="defect_density").axis is SweepAxis.DEFECT_DENSITY
    with pytest.raises(InvalidParameter):
        SweepSpec(low=1.0, high=0.5)
    with pytest.raises(InvalidParameter):
        SweepSpec(step=0)
    with pytest.raises(InvalidParameter):
        SweepSpec(axis="die_area")
