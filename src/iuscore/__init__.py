"""iuscore: intestinal ultrasound disease-activity scoring and structured reports.

Public API::

    from iuscore import (
        DiseaseProfile, Segment, Stratification,
        get_milan_score, get_ibus_score, get_segment_status, classify_ibus_activity,
        build_report_insights, ReportPipeline, ExamSession,
    )
"""

from __future__ import annotations

from iuscore.core.config import AppSettings
from iuscore.exceptions import ExamLoadError, IUScoreError, SegmentCatalogError, SessionError
from iuscore.scoring import (
    IbusClassification,
    ScoreSummary,
    build_score_summary,
    classify_ibus_activity,
    create_quick_calculator_segment,
    get_ibus_score,
    get_milan_score,
    get_segment_status,
    is_transmural_remission,
    segment_summary,
)
from iuscore.segments import (
    ABSENT_VISUALIZATION_REASON,
    DiseaseProfile,
    IbusActivityState,
    Segment,
    SegmentStatus,
    SegmentTemplate,
    Stratification,
    VisualizationQuality,
    get_visualization_quality,
    segment_has_data,
)
from iuscore.services import ExamSession, load_exam
from iuscore.synthesis import (
    ExamReport,
    IbusClassificationEntry,
    ReportInsights,
    ReportPipeline,
    build_report_insights,
    build_report_text,
    format_list,
    summarize_imaging_quality,
)

__all__ = [
    "ABSENT_VISUALIZATION_REASON",
    "AppSettings",
    "DiseaseProfile",
    "ExamLoadError",
    "ExamReport",
    "ExamSession",
    "IbusActivityState",
    "IbusClassification",
    "IbusClassificationEntry",
    "IUScoreError",
    "ReportInsights",
    "ReportPipeline",
    "ScoreSummary",
    "Segment",
    "SegmentCatalogError",
    "SegmentStatus",
    "SegmentTemplate",
    "SessionError",
    "Stratification",
    "VisualizationQuality",
    "build_report_insights",
    "build_report_text",
    "build_score_summary",
    "classify_ibus_activity",
    "create_quick_calculator_segment",
    "format_list",
    "get_ibus_score",
    "get_milan_score",
    "get_segment_status",
    "get_visualization_quality",
    "is_transmural_remission",
    "load_exam",
    "segment_has_data",
    "segment_summary",
    "summarize_imaging_quality",
]
