"""Per-segment severity status and IBUS-SAS activity classification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from iuscore.scoring.scores import get_ibus_score, get_milan_score
from iuscore.segments.models import (
    DiseaseProfile,
    IbusActivityState,
    SegmentStatus,
    SegmentTemplate,
    Stratification,
)
from iuscore.segments.visualization import segment_has_data

MILAN_INACTIVE_THRESHOLD = 6.2
IBUS_ACTIVE_THRESHOLD = 25.2
TRANSMURAL_REMISSION_MAX_BWT = 3.0


class SeverityThresholds(NamedTuple):
    mild: float
    moderate: float
    severe: float


# Bowel wall thickness in mm
BWT_THRESHOLDS: dict[DiseaseProfile, SeverityThresholds] = {
    DiseaseProfile.UC: SeverityThresholds(mild=3.5, moderate=4.5, severe=6.0),
    DiseaseProfile.CD: SeverityThresholds(mild=3.0, moderate=4.0, severe=5.5),
}

# Modified Limberg grade, shared by both profiles
DOPPLER_THRESHOLDS = SeverityThresholds(mild=1, moderate=2, severe=3)


@dataclass(frozen=True)
class IbusClassification:
    """Activity state of a CD segment with the score behind it."""

    state: IbusActivityState
    score: Optional[float]


def _reaches(value: Optional[float], threshold: float) -> bool:
    return value is not None and value >= threshold


def get_segment_status(segment: SegmentTemplate, profile: DiseaseProfile) -> SegmentStatus:
    """Severity tier from BWT and Doppler against the profile thresholds.

    For UC a computable Milan score below 6.2 short-circuits to
    ``UNINVOLVED`` before any threshold is checked.
    """
    if segment.not_visualised or not segment_has_data(segment):
        return SegmentStatus.UNINVOLVED

    profile = DiseaseProfile(profile)
    thresholds = BWT_THRESHOLDS[profile]
    bwt = None if segment.bwt_uncertain else segment.bowel_wall_thickness
    doppler = None if segment.doppler_uncertain else segment.doppler_grade

    if profile is DiseaseProfile.UC:
        milan_score = get_milan_score(segment)
        if milan_score is not None and milan_score < MILAN_INACTIVE_THRESHOLD:
            return SegmentStatus.UNINVOLVED

    for status, bwt_threshold, doppler_threshold in (
        (SegmentStatus.SEVERE, thresholds.severe, DOPPLER_THRESHOLDS.severe),
        (SegmentStatus.MODERATE, thresholds.moderate, DOPPLER_THRESHOLDS.moderate),
        (SegmentStatus.MILD, thresholds.mild, DOPPLER_THRESHOLDS.mild),
    ):
        if _reaches(bwt, bwt_threshold) or _reaches(doppler, doppler_threshold):
            return status

    if (
        segment.stratification in (Stratification.FOCAL, Stratification.EXTENSIVE)
        or segment.fat_wrapping
    ):
        return SegmentStatus.MILD

    return SegmentStatus.UNINVOLVED


def is_transmural_remission(segment: SegmentTemplate) -> bool:
    """Thin wall, no flow, preserved layering, quiet fat and no stricture."""
    if segment.not_visualised or segment.bwt_uncertain:
        return False
    bwt = segment.bowel_wall_thickness
    if bwt is None or bwt >= TRANSMURAL_REMISSION_MAX_BWT:
        return False

    doppler = segment.doppler_grade if segment.doppler_grade is not None else 0
    strat_normal = segment.stratification in (None, Stratification.NORMAL)
    no_stricture = not segment.luminal_narrowing and not segment.prestenotic_dilatation
    no_mesenteric_fat = not segment.fat_wrapping and not segment.fat_wrapping_uncertain

    return (
        doppler == 0
        and strat_normal
        and not segment.stratification_uncertain
        and no_mesenteric_fat
        and no_stricture
    )


def classify_ibus_activity(segment: SegmentTemplate) -> Optional[IbusClassification]:
    """Remission, inactive or active; ``None`` if the segment cannot be classified."""
    if segment.not_visualised:
        return None
    if is_transmural_remission(segment):
        # Remission does not require a computable score.
        return IbusClassification(IbusActivityState.REMISSION, get_ibus_score(segment))

    score = get_ibus_score(segment)
    if score is None:
        return None

    state = IbusActivityState.ACTIVE if score >= IBUS_ACTIVE_THRESHOLD else IbusActivityState.INACTIVE
    return IbusClassification(state, score)


__all__ = [
    "MILAN_INACTIVE_THRESHOLD",
    "IBUS_ACTIVE_THRESHOLD",
    "BWT_THRESHOLDS",
    "DOPPLER_THRESHOLDS",
    "IbusClassification",
    "get_segment_status",
    "is_transmural_remission",
    "classify_ibus_activity",
]
