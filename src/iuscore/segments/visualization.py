"""Derived visualization state of a segment."""

from __future__ import annotations

from iuscore.segments.catalog import ABSENT_VISUALIZATION_REASON
from iuscore.segments.models import SegmentTemplate, VisualizationQuality

_ABSENT_REASON_LOWER = ABSENT_VISUALIZATION_REASON.lower()


def get_visualization_quality(segment: SegmentTemplate) -> VisualizationQuality:
    """Resolve quality: not visualised, then manual override, then uncertainty flags."""
    if segment.not_visualised:
        return VisualizationQuality.NOT_VISUALIZED
    if segment.visualization_override is not None:
        return segment.visualization_override
    has_impairment = (
        segment.bwt_uncertain
        or segment.doppler_uncertain
        or segment.stratification_uncertain
        or segment.fat_wrapping_uncertain
    )
    return VisualizationQuality.IMPAIRED if has_impairment else VisualizationQuality.GOOD


def segment_has_data(segment: SegmentTemplate) -> bool:
    """True when any clinical field has been entered for the segment."""
    return (
        segment.bowel_wall_thickness is not None
        or segment.doppler_grade is not None
        or segment.stratification is not None
        or segment.fat_wrapping is not None
        or bool(segment.notes)
        or segment.bwt_uncertain
        or segment.doppler_uncertain
        or segment.stratification_uncertain
        or segment.fat_wrapping_uncertain
        or segment.length_cm is not None
        or segment.luminal_narrowing is True
        or segment.prestenotic_dilatation is True
        or segment.prestenotic_diameter_mm is not None
        or segment.lymph_nodes is not None
    )


def impairment_reason(segment: SegmentTemplate) -> str:
    """Trimmed impairment reason, or an empty string."""
    return (segment.visualization_impairment_reason or "").strip()


def has_absent_visualization_reason(segment: SegmentTemplate) -> bool:
    reason = impairment_reason(segment)
    return bool(reason) and reason.lower() == _ABSENT_REASON_LOWER


__all__ = [
    "get_visualization_quality",
    "segment_has_data",
    "impairment_reason",
    "has_absent_visualization_reason",
]
