import math

from yieldcalc.errors import InvalidParameter
from yieldcalc.validation import require_non_negative, require_half_open


def cost_per_good_die(wafer_cost, good_dies, fab_utilization):
    """
    Wafer cost amortised over chargeable functional output (CPGD).

    Returns ``math.inf`` when the wafer yields nothing chargeable; callers
    display that sentinel as "N/A".
    """
    wafer_cost = require_non_negative("wafer_cost", wafer_cost)
    good_dies = require_non_negative("good_dies", good_dies)
    fab_utilization = require_half_open("fab_utilization", fab_utilization, 0, 1)

    chargeable = good_dies * fab_utilization
    if chargeable == 0:
        return math.inf
    return wafer_cost / chargeable


def revenue(good_dies, cost_per_good_die, markup):
    """Zero dies sold is zero revenue, even at an infinite unit cost."""
    good_dies = require_non_negative("good_dies", good_dies)
    markup = require_non_negative("markup", markup)
    if good_dies == 0:
        return 0.0
    if math.isnan(cost_per_good_die) or cost_per_good_die < 0:
        raise InvalidParameter("cost_per_good_die", ">= 0", cost_per_good_die)
    if math.isinf(cost_per_good_die):
        return math.inf
    return good_dies * cost_per_good_die * markup


def format_cost(value):
    if math.isinf(value):
        return "N/A"
    return f"${value:,.2f}"
