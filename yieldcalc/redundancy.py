from yieldcalc.config import MAX_REPAIRABLE_AREA_FRACTION
from yieldcalc.validation import require_closed
from yieldcalc.yield_models import yield_rate


def effective_yield(params, repairable_area_fraction):
    """
    Yield once on-die redundancy repairs faults in the protected region.

    The repairable share of the critical area no longer kills a die, so the
    model sees ``pattern_density * (1 - fraction)``. The systematic cap still
    applies afterwards, so repair can never lift yield past process maturity.
    """
    fraction = require_closed(
        "repairable_area_fraction", repairable_area_fraction,
        0, MAX_REPAIRABLE_AREA_FRACTION
    )
    return yield_rate(params, pattern_density=params.pattern_density * (1.0 - fraction))
