"""Report pipeline: per-segment scores aggregated into exam-level insights and text."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date as date_type

from iuscore.scoring.status import classify_ibus_activity, get_segment_status
from iuscore.scoring.summary import segment_summary
from iuscore.segments.models import DiseaseProfile, SegmentStatus, SegmentTemplate
from iuscore.synthesis.impression import build_auto_impression, derive_crohns_status_label
from iuscore.synthesis.models import ExamReport, IbusClassificationEntry, ReportInsights
from iuscore.synthesis.visualization import summarize_imaging_quality

log = logging.getLogger(__name__)

DEFAULT_FINDINGS_TEXT = "Normal Intestinal Ultrasound"
FINDINGS_BULLET = "• "


def format_exam_date(value: date_type) -> str:
    """Long weekday, short month, day and year, e.g. ``Monday, Oct 19, 2026``."""
    return f"{value:%A}, {value:%b} {value.day}, {value.year}"


def build_findings_summary(
    profile: DiseaseProfile,
    segments: Sequence[SegmentTemplate],
) -> tuple[list[str], str]:
    """Bulleted per-segment summaries and the findings block built from them."""
    summaries = [f"{FINDINGS_BULLET}{segment_summary(s, profile)}" for s in segments]
    return summaries, "\n".join(summaries) if summaries else DEFAULT_FINDINGS_TEXT


def _highest_uc_severity(segments: Sequence[SegmentTemplate]) -> SegmentStatus:
    highest = SegmentStatus.UNINVOLVED
    for segment in segments:
        status = get_segment_status(segment, DiseaseProfile.UC)
        if status.rank > highest.rank:
            highest = status
    return highest


def build_report_insights(
    profile: DiseaseProfile,
    segments: Sequence[SegmentTemplate],
) -> ReportInsights:
    """Compose severity, impression, findings and imaging quality for an exam.

    Pure function of its inputs: calling it twice on the same snapshot gives
    equal results.
    """
    profile = DiseaseProfile(profile)
    is_uc = profile is DiseaseProfile.UC

    uc_highest = _highest_uc_severity(segments) if is_uc else SegmentStatus.UNINVOLVED
    ibus_classifications = (
        []
        if is_uc
        else [IbusClassificationEntry(s.label, classify_ibus_activity(s)) for s in segments]
    )
    highest_status_label = (
        uc_highest.value if is_uc else derive_crohns_status_label(ibus_classifications)
    )
    segment_summaries, findings_text = build_findings_summary(profile, segments)

    return ReportInsights(
        uc_highest_severity=uc_highest,
        ibus_classifications=ibus_classifications,
        highest_status_label=highest_status_label,
        auto_impression=build_auto_impression(
            profile,
            segments,
            uc_highest_severity=uc_highest,
            ibus_classifications=ibus_classifications,
        ),
        segment_summaries=segment_summaries,
        findings_text=findings_text,
        imaging_quality_summary=summarize_imaging_quality(segments),
    )


def build_report_text(
    *,
    date: str,
    indication: str,
    imaging_quality: str,
    findings_text: str,
    impression: str,
) -> str:
    return (
        f"Date: {date}\n"
        f"Indication: {indication}\n"
        f"Imaging quality: {imaging_quality}\n"
        f"\n"
        f"Findings\n"
        f"{findings_text}\n"
        f"\n"
        f"Impression\n"
        f"{impression}"
    )


class ReportPipeline:
    """Builds ``ExamReport`` objects from a segment snapshot.

    Stateless apart from logging; safe to share between sessions.
    """

    def build_insights(
        self,
        profile: DiseaseProfile,
        segments: Sequence[SegmentTemplate],
    ) -> ReportInsights:
        insights = build_report_insights(profile, segments)
        log.debug(
            "Composed report insights: profile=%s segments=%d status=%s",
            DiseaseProfile(profile).value,
            len(segments),
            insights.highest_status_label,
        )
        return insights

    def compose(
        self,
        profile: DiseaseProfile,
        segments: Sequence[SegmentTemplate],
        *,
        date: str | date_type,
        indication: str = "",
    ) -> ExamReport:
        """Insights plus header fields; a ``date`` object is formatted for display."""
        if isinstance(date, date_type):
            date = format_exam_date(date)
        return ExamReport(
            profile=DiseaseProfile(profile),
            date=date,
            indication=indication,
            insights=self.build_insights(profile, segments),
        )


__all__ = [
    "DEFAULT_FINDINGS_TEXT",
    "format_exam_date",
    "build_findings_summary",
    "build_report_insights",
    "build_report_text",
    "ReportPipeline",
]
