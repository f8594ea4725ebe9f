"""
Yield Model Module.

Closed-form yield models sharing one interface. Defect density and die area
are first folded into the critical-area defect exposure

  lambda = D0 * (die_area_mm2 / 100) * pattern_density

(mm² converted to cm², scaled by the defect-sensitive fraction of the die).
A zero exposure yields exactly 1 for every model. The statistical yield is
then capped by process maturity, a multiplicative systematic-loss ceiling.
"""
import math

from yieldcalc.enums import YieldModel
from yieldcalc.errors import InvalidParameter
from yieldcalc.validation import (
    require_non_negative, require_positive, require_closed,
)


def critical_exposure(d0_per_cm2, die_area_mm2, pattern_density):
    """Expected fatal defects per die (lambda)."""
    d0_per_cm2 = require_non_negative("defect_density_per_cm2", d0_per_cm2)
    die_area_mm2 = require_positive("die_area_mm2", die_area_mm2)
    pattern_density = require_closed("pattern_density", pattern_density, 0, 1)
    return d0_per_cm2 * (die_area_mm2 / 100.0) * pattern_density


def poisson_yield(lam):
    """Independent, uniformly scattered defects. The optimistic baseline."""
    return math.exp(-lam)


def murphy_yield(lam):
    """Murphy's triangular defect-density distribution."""
    if lam == 0:
        return 1.0
    # -expm1(-x) == 1 - exp(-x) without cancellation for small lambda
    return (-math.expm1(-lam) / lam) ** 2


def negative_binomial_yield(lam, alpha):
    """
    Clustered defects. Smaller alpha means tighter clusters and a higher yield
    for the same lambda; alpha -> inf converges to Poisson.
    """
    if lam == 0:
        return 1.0
    if math.isinf(alpha):
        return poisson_yield(lam)
    return (1.0 + lam / alpha) ** (-alpha)


def yield_from_exposure(model, lam, alpha):
    if lam < 0:
        raise InvalidParameter("lambda", ">= 0", lam)
    resolved = YieldModel.parse(model)
    if resolved is YieldModel.POISSON:
        y = poisson_yield(lam)
    elif resolved is YieldModel.MURPHY:
        y = murphy_yield(lam)
    elif resolved is YieldModel.NEGATIVE_BINOMIAL:
        y = negative_binomial_yield(lam, require_positive("cluster_factor", alpha, allow_inf=True))
    else:
        raise InvalidParameter("model", f"one of {YieldModel.values()}", model)
    return min(max(y, 0.0), 1.0)


def raw_yield(model, d0_per_cm2, die_area_mm2, alpha, pattern_density):
    """Statistical yield of the chosen model, before the systematic cap."""
    lam = critical_exposure(d0_per_cm2, die_area_mm2, pattern_density)
    return yield_from_exposure(model, lam, alpha)


def apply_systematic_cap(raw, process_maturity):
    process_maturity = require_closed("process_maturity", process_maturity, 0, 1)
    return raw * process_maturity


def yield_rate(params, pattern_density=None):
    """
    Capped yield for a ``ProcessParameters``. ``pattern_density`` overrides the
    parameter's own value (used by the redundancy adjustment).
    """
    if pattern_density is None:
        pattern_density = params.pattern_density
    raw = raw_yield(
        params.model,
        params.defect_density_per_cm2,
        params.die_area_mm2,
        params.cluster_factor,
        pattern_density,
    )
    return apply_systematic_cap(raw, params.process_maturity)


def good_dies(total_dies, yield_fraction):
    """Expected functional dies. Deliberately fractional."""
    require_non_negative("total_dies", total_dies)
    yield_fraction = require_closed("yield_rate", yield_fraction, 0, 1)
    return total_dies * yield_fraction
