"""
Input domain checks shared by the record types and the formula functions.

Each check returns the value as a float so callers can normalise in one step.
"""
import math
import numbers

from yieldcalc.errors import InvalidParameter


def _as_number(field, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(field, "a real number", value)
    value = float(value)
    if math.isnan(value):
        raise InvalidParameter(field, "a real number", value)
    return value


def require_non_negative(field, value):
    value = _as_number(field, value)
    if value < 0 or math.isinf(value):
        raise InvalidParameter(field, ">= 0 and finite", value)
    return value


def require_positive(field, value, allow_inf=False):
    value = _as_number(field, value)
    if value <= 0 or (math.isinf(value) and not allow_inf):
        raise InvalidParameter(field, "> 0" if allow_inf else "> 0 and finite", value)
    return value


def require_closed(field, value, low, high):
    """value in [low, high]"""
    value = _as_number(field, value)
    if not low <= value <= high:
        raise InvalidParameter(field, f"in [{low:g},{high:g}]", value)
    return value


def require_half_open(field, value, low, high):
    """value in (low, high]"""
    value = _as_number(field, value)
    if not low < value <= high:
        raise InvalidParameter(field, f"in ({low:g},{high:g}]", value)
    return value
