import math

from yieldcalc.logger import get_logger
from yieldcalc.validation import require_non_negative, require_positive

logger = get_logger(__name__)


def usable_radius(diameter_mm, edge_exclusion_mm):
    """Radius of the usable disk once the edge ring is removed (never negative)."""
    return max(diameter_mm / 2.0 - edge_exclusion_mm, 0.0)


def gross_die_count(diameter_mm, die_area_mm2, edge_exclusion_mm):
    """
    Estimate how many whole dies fit on the usable part of the wafer.

    Uses the large-area approximation over the usable radius r:

      N = floor( pi * r² / A  -  pi * 2r / sqrt(2 * A) )

    The second term removes the partial dies lost along the boundary. An edge
    exclusion that swallows the whole wafer gives 0 dies, not an error.
    """
    diameter_mm = require_non_negative("wafer_diameter_mm", diameter_mm)
    die_area_mm2 = require_positive("die_area_mm2", die_area_mm2)
    edge_exclusion_mm = require_non_negative("edge_exclusion_mm", edge_exclusion_mm)

    r = usable_radius(diameter_mm, edge_exclusion_mm)
    if r <= 0:
        return 0

    n = math.pi * r**2 / die_area_mm2 - math.pi * (2 * r) / math.sqrt(2 * die_area_mm2)
    return max(math.floor(n), 0)


def efficiency(total_dies, die_area_mm2, diameter_mm, edge_exclusion_mm):
    """
    Fraction of the full wafer area covered by counted dies.

    The edge exclusion is accepted for call-site symmetry with
    ``gross_die_count``; the denominator is always the full wafer.
    """
    die_area_mm2 = require_positive("die_area_mm2", die_area_mm2)
    diameter_mm = require_non_negative("wafer_diameter_mm", diameter_mm)
    require_non_negative("edge_exclusion_mm", edge_exclusion_mm)
    require_non_negative("total_dies", total_dies)

    wafer_area = math.pi * (diameter_mm / 2.0) ** 2
    if total_dies == 0 or wafer_area == 0:
        return 0.0

    ratio = (total_dies * die_area_mm2) / wafer_area
    if ratio > 1.0:
        logger.warning(
            f"Die area {total_dies} x {die_area_mm2:g} mm² exceeds wafer area "
            f"{wafer_area:.1f} mm²; clamping efficiency to 1."
        )
        return 1.0
    return ratio
