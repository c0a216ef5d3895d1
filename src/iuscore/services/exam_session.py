"""Exam session: owns the segment list of one report and its lifecycle.

Instance ids come from a counter owned by the session, so two sessions
never share identity state.
"""

from __future__ import annotations

import itertools
import logging
from datetime import date
from typing import Any, Optional

from iuscore.core.config import AppSettings
from iuscore.exceptions import SegmentCatalogError, SessionError
from iuscore.segments.catalog import DEFAULT_SEGMENTS, find_additional_segment
from iuscore.segments.models import (
    DiseaseProfile,
    Segment,
    SegmentTemplate,
    VisualizationQuality,
)
from iuscore.synthesis.models import ExamReport, ReportInsights
from iuscore.synthesis.pipeline import ReportPipeline

log = logging.getLogger(__name__)


class ExamSession:
    """Transient state of one intestinal ultrasound report."""

    def __init__(
        self,
        profile: DiseaseProfile | str | None = None,
        *,
        indication: Optional[str] = None,
        exam_date: Optional[date] = None,
        settings: Optional[AppSettings] = None,
        pipeline: Optional[ReportPipeline] = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._pipeline = pipeline or ReportPipeline()
        self._counter = itertools.count(1)

        self.profile = DiseaseProfile(profile or self._settings.report.default_profile)
        self.indication = (
            indication if indication is not None else self._settings.report.default_indication
        )
        self.exam_date = exam_date or date.today()
        self.overall_quality: Optional[VisualizationQuality] = None
        self.overall_reason = self._settings.report.default_impairment_reason
        self.segments: list[Segment] = self._default_segments()

    # ── Segment lifecycle ───────────────────────────────────────────

    def _create_instance(self, template: SegmentTemplate) -> Segment:
        return Segment(
            **template.model_dump(),
            instance_id=f"{template.id}-{next(self._counter)}",
        )

    def _default_segments(self) -> list[Segment]:
        return [self._create_instance(t) for t in DEFAULT_SEGMENTS]

    def _index_of(self, instance_id: str) -> int:
        for index, segment in enumerate(self.segments):
            if segment.instance_id == instance_id:
                return index
        raise SessionError(f"No segment with instance id {instance_id!r}")

    def get_segment(self, instance_id: str) -> Segment:
        return self.segments[self._index_of(instance_id)]

    def visible_segments(self) -> list[Segment]:
        """Segments shown for the current profile; UC hides small bowel."""
        if self.profile is DiseaseProfile.UC:
            return [s for s in self.segments if not s.is_small_bowel]
        return list(self.segments)

    def add_segment(self, segment_id: str) -> Segment:
        """Append a new instance of a CD small-bowel target."""
        template = find_additional_segment(segment_id)
        if template is None:
            raise SegmentCatalogError(segment_id)
        segment = self._create_instance(template)
        self.segments.append(segment)
        log.info("Added segment %s (%s)", segment.instance_id, segment.label)
        return segment

    def remove_segment(self, instance_id: str) -> None:
        index = self._index_of(instance_id)
        segment = self.segments[index]
        if not segment.is_dynamic:
            raise SessionError(f"Segment {segment.label!r} is part of the fixed catalog")
        del self.segments[index]
        log.info("Removed segment %s", instance_id)

    def update_segment(self, instance_id: str, **changes: Any) -> Segment:
        """Replace a segment with a validated, updated copy."""
        if "instanceId" in changes:
            raise SessionError("instance_id cannot be changed")
        index = self._index_of(instance_id)
        current = self.segments[index]
        data = current.model_dump()
        data.update(changes)
        updated = Segment.model_validate(data)
        self.segments[index] = updated
        return updated

    def set_profile(self, profile: DiseaseProfile | str) -> None:
        self.profile = DiseaseProfile(profile)

    # ── Exam-wide visualization ─────────────────────────────────────

    def _normalize_reason(self, reason: str) -> str:
        return reason if reason.strip() else self._settings.report.default_impairment_reason

    def apply_overall_visualization(
        self,
        quality: VisualizationQuality | str,
        reason: str = "",
        *,
        update_reason_only: bool = False,
    ) -> None:
        """Apply one visualization state to every segment of the exam.

        With ``update_reason_only`` the state is left alone and only the
        reason of segments already in that state is rewritten.
        """
        quality = VisualizationQuality(quality)
        reason = reason if quality is VisualizationQuality.GOOD else self._normalize_reason(reason)
        self.overall_quality = quality
        self.overall_reason = reason

        updated: list[Segment] = []
        for segment in self.segments:
            updated.append(self._apply_quality(segment, quality, reason, update_reason_only))
        self.segments = updated
        log.info("Applied overall visualization %s to %d segments", quality.value, len(updated))

    @staticmethod
    def _apply_quality(
        segment: Segment,
        quality: VisualizationQuality,
        reason: str,
        update_reason_only: bool,
    ) -> Segment:
        if update_reason_only:
            if quality is VisualizationQuality.IMPAIRED:
                if not segment.not_visualised and segment.visualization_override is VisualizationQuality.IMPAIRED:
                    return segment.model_copy(update={"visualization_impairment_reason": reason})
            elif quality is VisualizationQuality.NOT_VISUALIZED and segment.not_visualised:
                return segment.model_copy(update={"visualization_impairment_reason": reason})
            return segment

        if quality is VisualizationQuality.NOT_VISUALIZED:
            if segment.not_visualised:
                return segment.model_copy(update={"visualization_impairment_reason": reason})
            return segment.model_copy(update={
                "not_visualised": True,
                "visualization_override": None,
                "visualization_impairment_reason": reason,
            })
        if segment.not_visualised:
            return segment
        if quality is VisualizationQuality.IMPAIRED:
            return segment.model_copy(update={
                "not_visualised": None,
                "visualization_override": VisualizationQuality.IMPAIRED,
                "visualization_impairment_reason": reason,
            })
        return segment.model_copy(update={
            "not_visualised": None,
            "visualization_override": None,
            "visualization_impairment_reason": None,
        })

    # ── Reporting ───────────────────────────────────────────────────

    def insights(self) -> ReportInsights:
        return self._pipeline.build_insights(self.profile, self.visible_segments())

    def report(self) -> ExamReport:
        return self._pipeline.compose(
            self.profile,
            self.visible_segments(),
            date=self.exam_date,
            indication=self.indication,
        )

    def report_text(self) -> str:
        return self.report().report_text()

    def reset(self) -> None:
        """Fresh catalog, empty indication, no exam-wide visualization state."""
        self.segments = self._default_segments()
        self.indication = ""
        self.overall_quality = None
        self.overall_reason = self._settings.report.default_impairment_reason
        log.info("Exam session reset")


__all__ = ["ExamSession"]
