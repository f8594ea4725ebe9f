"""
Derivation Pipeline.

The single source of truth that chains geometry, yield, redundancy and
economics from one immutable parameter set to a result set. Every function
is pure: the same inputs always give bit-identical outputs.
"""
from typing import List, Optional

import numpy as np

from yieldcalc.config import DISPLAY_COST_CEILING, SWEEP_TOLERANCE
from yieldcalc.economics import cost_per_good_die, revenue
from yieldcalc.enums import SweepAxis
from yieldcalc.errors import InvalidParameter
from yieldcalc.geometry import gross_die_count, efficiency
from yieldcalc.logger import get_logger
from yieldcalc.models import (
    ProcessParameters, EconomicsInputs, SweepSpec,
    DerivedStats, EconomicsResult, CostCurvePoint,
)
from yieldcalc.redundancy import effective_yield
from yieldcalc.validation import require_positive
from yieldcalc.yield_models import yield_rate, good_dies

logger = get_logger(__name__)

DEFAULT_SWEEP = SweepSpec()


def _total_dies(params: ProcessParameters) -> int:
    return gross_die_count(params.wafer_diameter_mm, params.die_area_mm2, params.edge_exclusion_mm)


def derive_stats(params: ProcessParameters) -> DerivedStats:
    """Die count, capped yield, expected good dies and area efficiency."""
    total = _total_dies(params)
    rate = yield_rate(params)
    stats = DerivedStats(
        yield_rate=rate,
        total_dies=total,
        good_dies=good_dies(total, rate),
        efficiency=efficiency(total, params.die_area_mm2, params.wafer_diameter_mm, params.edge_exclusion_mm),
    )
    logger.debug(f"Derived stats for {params.model.label}: {stats}")
    return stats


def fab_utilization_for(params: ProcessParameters, econ: EconomicsInputs) -> float:
    """The economics-local percentage wins over the process value when set."""
    if econ.fab_utilization_pct is not None:
        return econ.fab_utilization_pct / 100.0
    return params.fab_utilization


def derive_economics(params: ProcessParameters, econ: EconomicsInputs) -> EconomicsResult:
    """Redundancy-adjusted yield, good dies, cost per good die and revenue."""
    y = effective_yield(params, econ.repairable_area_fraction)
    g = good_dies(_total_dies(params), y)
    cpgd = cost_per_good_die(econ.wafer_cost, g, fab_utilization_for(params, econ))
    result = EconomicsResult(
        effective_yield=y,
        good_dies=g,
        cost_per_good_die=cpgd,
        revenue=revenue(g, cpgd, econ.markup),
    )
    logger.debug(f"Derived economics: {result}")
    return result


def sample_points(spec: SweepSpec) -> np.ndarray:
    """
    Sample values low, low + step, ... up to high inclusive (within tolerance).

    Each sample is computed as ``low + i * step`` so no drift accumulates.
    """
    step = require_positive("step", spec.step)
    count = int(np.floor((spec.high - spec.low) / step + SWEEP_TOLERANCE)) + 1
    return spec.low + np.arange(count, dtype=float) * step


def sweep_cost_curve(
    params: ProcessParameters,
    econ: EconomicsInputs,
    spec: Optional[SweepSpec] = None,
    ceiling: float = DISPLAY_COST_CEILING,
) -> List[CostCurvePoint]:
    """
    Cost per good die and effective yield across a range of defect densities.

    The display ceiling is applied to the returned cost field only. A new list
    is built on every call.
    """
    if spec is None:
        spec = DEFAULT_SWEEP
    if spec.axis is not SweepAxis.DEFECT_DENSITY:
        raise InvalidParameter("axis", SweepAxis.DEFECT_DENSITY.value, spec.axis)
    ceiling = require_positive("ceiling", ceiling, allow_inf=True)

    points = []
    for d0 in sample_points(spec):
        result = derive_economics(params.replace(defect_density_per_cm2=float(d0)), econ)
        points.append(CostCurvePoint(
            defect_density=float(d0),
            yield_pct=result.effective_yield * 100.0,
            cost_per_good_die=min(result.cost_per_good_die, ceiling),
        ))
    logger.debug(f"Swept {len(points)} points over D0 [{spec.low:g}, {spec.high:g}]")
    return points
