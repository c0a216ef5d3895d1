"""Report composer data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from iuscore.scoring.status import IbusClassification
from iuscore.segments.models import DiseaseProfile, SegmentStatus


@dataclass(frozen=True)
class IbusClassificationEntry:
    """IBUS-SAS classification of one CD segment, ``None`` if unclassifiable."""

    label: str
    classification: Optional[IbusClassification] = None


@dataclass
class ReportInsights:
    """Everything the report needs, derived from one exam snapshot.

    ``uc_highest_severity`` is only meaningful for UC and stays
    ``UNINVOLVED`` for CD; ``ibus_classifications`` is only filled for CD.
    """

    uc_highest_severity: SegmentStatus = SegmentStatus.UNINVOLVED
    ibus_classifications: list[IbusClassificationEntry] = field(default_factory=list)
    highest_status_label: str = ""
    auto_impression: str = ""
    segment_summaries: list[str] = field(default_factory=list)
    findings_text: str = ""
    imaging_quality_summary: str = ""


@dataclass
class ExamReport:
    """A composed exam report: header fields plus the derived insights."""

    profile: DiseaseProfile
    date: str
    indication: str = ""
    insights: ReportInsights = field(default_factory=ReportInsights)

    def report_text(self) -> str:
        """Fixed-format plain-text report for clipboard copy."""
        from iuscore.synthesis.pipeline import build_report_text

        return build_report_text(
            date=self.date,
            indication=self.indication,
            imaging_quality=self.insights.imaging_quality_summary,
            findings_text=self.insights.findings_text,
            impression=self.insights.auto_impression,
        )


__all__ = [
    "IbusClassification",
    "IbusClassificationEntry",
    "ReportInsights",
    "ExamReport",
]
