"""Segment model: measurement records, catalog and visualization state."""

from __future__ import annotations

from iuscore.segments.catalog import (
    ABSENT_VISUALIZATION_REASON,
    CROHNS_ADDITIONAL_SEGMENTS,
    DEFAULT_IMPAIRMENT_REASON,
    DEFAULT_SEGMENTS,
    INDICATION_OPTIONS,
    VISUALIZATION_IMPAIRMENT_OPTIONS,
)
from iuscore.segments.models import (
    DiseaseProfile,
    IbusActivityState,
    Segment,
    SegmentStatus,
    SegmentTemplate,
    Stratification,
    VisualizationQuality,
)
from iuscore.segments.visualization import (
    get_visualization_quality,
    has_absent_visualization_reason,
    segment_has_data,
)

__all__ = [
    "ABSENT_VISUALIZATION_REASON",
    "CROHNS_ADDITIONAL_SEGMENTS",
    "DEFAULT_IMPAIRMENT_REASON",
    "DEFAULT_SEGMENTS",
    "INDICATION_OPTIONS",
    "VISUALIZATION_IMPAIRMENT_OPTIONS",
    "DiseaseProfile",
    "IbusActivityState",
    "Segment",
    "SegmentStatus",
    "SegmentTemplate",
    "Stratification",
    "VisualizationQuality",
    "get_visualization_quality",
    "has_absent_visualization_reason",
    "segment_has_data",
]
