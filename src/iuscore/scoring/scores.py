"""Milan ultrasound criteria and IBUS-SAS composite scores.

Both scores return ``None`` instead of a number whenever an input they rely
on is missing, flagged uncertain, or the segment was not visualised.
Callers treat ``None`` as "not yet assessable", never as zero.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from iuscore.segments.models import SegmentTemplate, Stratification

# Milan: BWT (mm), Doppler grade, any stratification loss
MILAN_BWT_WEIGHT = 1.5
MILAN_DOPPLER_WEIGHT = 3.5
MILAN_STRATIFICATION_POINTS = 6.0

# IBUS-SAS: BWT (mm), mesenteric fat (0-2), Doppler grade, stratification loss (0-3)
IBUS_BWT_WEIGHT = 4
IBUS_FAT_WEIGHT = 15
IBUS_DOPPLER_WEIGHT = 7
IBUS_STRATIFICATION_WEIGHT = 4

_ONE_DECIMAL = Decimal("0.1")


def round_one_decimal(value: float) -> float:
    """Round half-up on the exact binary value, e.g. ``5.25 -> 5.3``."""
    return float(Decimal(value).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


def format_one_decimal(value: float) -> str:
    return f"{round_one_decimal(value):.1f}"


def get_milan_score(segment: SegmentTemplate) -> Optional[float]:
    """Milan score for a UC segment, or ``None`` when BWT is unusable."""
    if segment.not_visualised:
        return None
    if segment.bwt_uncertain or segment.bowel_wall_thickness is None:
        return None

    doppler = 0 if segment.doppler_uncertain or segment.doppler_grade is None else segment.doppler_grade
    strat_disrupted = segment.stratification in (Stratification.FOCAL, Stratification.EXTENSIVE)

    score = (
        MILAN_BWT_WEIGHT * segment.bowel_wall_thickness
        + MILAN_DOPPLER_WEIGHT * doppler
        + (MILAN_STRATIFICATION_POINTS if strat_disrupted else 0)
    )
    return round_one_decimal(score)


def _fat_component(segment: SegmentTemplate) -> int:
    if segment.fat_wrapping:
        return 2
    if segment.fat_wrapping_uncertain:
        return 1
    return 0


def _stratification_component(segment: SegmentTemplate) -> int:
    if segment.stratification_uncertain:
        return 1
    if segment.stratification is Stratification.FOCAL:
        return 2
    if segment.stratification is Stratification.EXTENSIVE:
        return 3
    return 0


def get_ibus_score(segment: SegmentTemplate) -> Optional[float]:
    """IBUS-SAS for a CD segment; needs certain BWT and Doppler grade."""
    if segment.not_visualised:
        return None
    if segment.bwt_uncertain or segment.doppler_uncertain:
        return None
    if segment.bowel_wall_thickness is None or segment.doppler_grade is None:
        return None

    score = (
        IBUS_BWT_WEIGHT * segment.bowel_wall_thickness
        + IBUS_FAT_WEIGHT * _fat_component(segment)
        + IBUS_DOPPLER_WEIGHT * segment.doppler_grade
        + IBUS_STRATIFICATION_WEIGHT * _stratification_component(segment)
    )
    return round_one_decimal(score)


__all__ = [
    "round_one_decimal",
    "format_one_decimal",
    "get_milan_score",
    "get_ibus_score",
]
