"""
Wafer die-yield and unit-economics calculator.
"""
from yieldcalc.enums import YieldModel, SweepAxis
from yieldcalc.errors import InvalidParameter
from yieldcalc.models import (
    ProcessParameters, EconomicsInputs, SweepSpec,
    DerivedStats, EconomicsResult, CostCurvePoint,
)
from yieldcalc.pipeline import derive_stats, derive_economics, sweep_cost_curve

__all__ = [
    "YieldModel", "SweepAxis", "InvalidParameter",
    "ProcessParameters", "EconomicsInputs", "SweepSpec",
    "DerivedStats", "EconomicsResult", "CostCurvePoint",
    "derive_stats", "derive_economics", "sweep_cost_curve",
]
