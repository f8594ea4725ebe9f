"""
Domain Models for Yield and Cost Derivation.

Every record is an immutable value object. Process and economics inputs are
validated on construction; an "update" is a call to ``replace`` which builds
and validates a new instance.
"""
import dataclasses
from dataclasses import dataclass
from typing import Optional

from yieldcalc.config import (
    DEFAULT_WAFER_DIAMETER_MM, DEFAULT_DIE_AREA_MM2, DEFAULT_DEFECT_DENSITY,
    DEFAULT_CLUSTER_FACTOR, DEFAULT_EDGE_EXCLUSION_MM, DEFAULT_PATTERN_DENSITY,
    DEFAULT_PROCESS_MATURITY, DEFAULT_FAB_UTILIZATION,
    MIN_WAFER_DIAMETER_MM, MAX_WAFER_DIAMETER_MM,
    DEFAULT_WAFER_COST, DEFAULT_REPAIRABLE_AREA_FRACTION, MAX_REPAIRABLE_AREA_FRACTION,
    DEFAULT_SCRIBE_WIDTH_MM, DEFAULT_FAB_UTILIZATION_PCT,
    MIN_FAB_UTILIZATION_PCT, MAX_FAB_UTILIZATION_PCT, DEFAULT_MARKUP,
    DEFAULT_SWEEP_LOW, DEFAULT_SWEEP_HIGH, DEFAULT_SWEEP_STEP,
)
from yieldcalc.enums import YieldModel, SweepAxis
from yieldcalc.errors import InvalidParameter
from yieldcalc.validation import (
    require_non_negative, require_positive, require_closed, require_half_open,
)


def _set(obj, name, value):
    # frozen dataclasses only allow normalisation through object.__setattr__
    object.__setattr__(obj, name, value)


@dataclass(frozen=True)
class ProcessParameters:
    """
    Wafer geometry, die footprint, defect statistics and process assumptions
    for a single derivation request.
    """
    wafer_diameter_mm: float = DEFAULT_WAFER_DIAMETER_MM
    die_area_mm2: float = DEFAULT_DIE_AREA_MM2
    defect_density_per_cm2: float = DEFAULT_DEFECT_DENSITY
    cluster_factor: float = DEFAULT_CLUSTER_FACTOR
    model: YieldModel = YieldModel.POISSON
    edge_exclusion_mm: float = DEFAULT_EDGE_EXCLUSION_MM
    pattern_density: float = DEFAULT_PATTERN_DENSITY
    process_maturity: float = DEFAULT_PROCESS_MATURITY
    fab_utilization: float = DEFAULT_FAB_UTILIZATION

    def __post_init__(self):
        model = YieldModel.parse(self.model)
        if model is None:
            raise InvalidParameter("model", f"one of {YieldModel.values()}", self.model)
        _set(self, "model", model)

        diameter = require_half_open(
            "wafer_diameter_mm", self.wafer_diameter_mm,
            MIN_WAFER_DIAMETER_MM, MAX_WAFER_DIAMETER_MM
        )
        _set(self, "wafer_diameter_mm", diameter)
        _set(self, "die_area_mm2", require_positive("die_area_mm2", self.die_area_mm2))
        _set(self, "defect_density_per_cm2",
             require_non_negative("defect_density_per_cm2", self.defect_density_per_cm2))
        _set(self, "cluster_factor",
             require_positive("cluster_factor", self.cluster_factor, allow_inf=True))

        edge = require_non_negative("edge_exclusion_mm", self.edge_exclusion_mm)
        if edge >= diameter / 2:
            raise InvalidParameter("edge_exclusion_mm", f"in [0,{diameter / 2:g})", edge)
        _set(self, "edge_exclusion_mm", edge)

        _set(self, "pattern_density", require_closed("pattern_density", self.pattern_density, 0, 1))
        _set(self, "process_maturity", require_closed("process_maturity", self.process_maturity, 0, 1))
        _set(self, "fab_utilization", require_half_open("fab_utilization", self.fab_utilization, 0, 1))

    def replace(self, **changes) -> "ProcessParameters":
        """Returns a new, validated copy with the given fields changed."""
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class EconomicsInputs:
    """Cost-side inputs. ``fab_utilization_pct`` overrides the process value when set."""
    wafer_cost: float = DEFAULT_WAFER_COST
    repairable_area_fraction: float = DEFAULT_REPAIRABLE_AREA_FRACTION
    scribe_width_mm: float = DEFAULT_SCRIBE_WIDTH_MM  # reserved, unused by the formulas
    fab_utilization_pct: Optional[float] = DEFAULT_FAB_UTILIZATION_PCT
    markup: float = DEFAULT_MARKUP

    def __post_init__(self):
        _set(self, "wafer_cost", require_non_negative("wafer_cost", self.wafer_cost))
        _set(self, "repairable_area_fraction", require_closed(
            "repairable_area_fraction", self.repairable_area_fraction,
            0, MAX_REPAIRABLE_AREA_FRACTION
        ))
        _set(self, "scribe_width_mm", require_non_negative("scribe_width_mm", self.scribe_width_mm))
        if self.fab_utilization_pct is not None:
            _set(self, "fab_utilization_pct", require_closed(
                "fab_utilization_pct", self.fab_utilization_pct,
                MIN_FAB_UTILIZATION_PCT, MAX_FAB_UTILIZATION_PCT
            ))
        _set(self, "markup", require_non_negative("markup", self.markup))

    def replace(self, **changes) -> "EconomicsInputs":
        return dataclasses.replace(self, **changes)


@dataclass(frozen=True)
class SweepSpec:
    """Inclusive sampling range for a cost curve."""
    low: float = DEFAULT_SWEEP_LOW
    high: float = DEFAULT_SWEEP_HIGH
    step: float = DEFAULT_SWEEP_STEP
    axis: SweepAxis = SweepAxis.DEFECT_DENSITY

    def __post_init__(self):
        if not isinstance(self.axis, SweepAxis):
            try:
                _set(self, "axis", SweepAxis(self.axis))
            except ValueError:
                raise InvalidParameter("axis", f"one of {[a.value for a in SweepAxis]}", self.axis)
        low = require_non_negative("low", self.low)
        high = require_non_negative("high", self.high)
        if high < low:
            raise InvalidParameter("high", f">= low ({low:g})", high)
        _set(self, "low", low)
        _set(self, "high", high)
        _set(self, "step", require_positive("step", self.step))


@dataclass(frozen=True)
class DerivedStats:
    yield_rate: float
    total_dies: int
    good_dies: float  # expectation, not rounded
    efficiency: float


@dataclass(frozen=True)
class EconomicsResult:
    effective_yield: float
    good_dies: float
    cost_per_good_die: float  # math.inf when no good dies
    revenue: float


@dataclass(frozen=True)
class CostCurvePoint:
    """One sample of a cost curve; the cost is clamped to the chart ceiling."""
    defect_density: float
    yield_pct: float
    cost_per_good_die: float
