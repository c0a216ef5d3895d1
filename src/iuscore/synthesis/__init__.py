"""Report composer: exam-level severity, impression, findings and imaging quality.

Usage::

    from iuscore.synthesis import ReportPipeline

    report = ReportPipeline().compose(profile, segments, date=date.today())
    print(report.report_text())
"""

from __future__ import annotations

from iuscore.synthesis.impression import build_auto_impression, derive_crohns_status_label
from iuscore.synthesis.models import (
    ExamReport,
    IbusClassification,
    IbusClassificationEntry,
    ReportInsights,
)
from iuscore.synthesis.pipeline import (
    DEFAULT_FINDINGS_TEXT,
    ReportPipeline,
    build_findings_summary,
    build_report_insights,
    build_report_text,
    format_exam_date,
)
from iuscore.synthesis.text import format_list
from iuscore.synthesis.visualization import build_visualization_statement, summarize_imaging_quality

__all__ = [
    "DEFAULT_FINDINGS_TEXT",
    "ExamReport",
    "IbusClassification",
    "IbusClassificationEntry",
    "ReportInsights",
    "ReportPipeline",
    "build_auto_impression",
    "build_findings_summary",
    "build_report_insights",
    "build_report_text",
    "build_visualization_statement",
    "derive_crohns_status_label",
    "format_exam_date",
    "format_list",
    "summarize_imaging_quality",
]
