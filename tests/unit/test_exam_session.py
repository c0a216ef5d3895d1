"""Tests for the exam session: segment lifecycle and exam-wide visualization."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from iuscore.core.config import AppSettings, ReportConfig
from iuscore.exceptions import SegmentCatalogError, SessionError
from iuscore.segments.models import DiseaseProfile, VisualizationQuality
from iuscore.services.exam_session import ExamSession

_DEFAULT_IDS = [
    "rectum-1",
    "sigmoid-2",
    "descending-3",
    "transverse-4",
    "ascending-5",
    "caecum-6",
    "terminalIleum-7",
]


def _make_session(profile: str = "uc") -> ExamSession:
    settings = AppSettings(report=ReportConfig())
    return ExamSession(profile, exam_date=date(2026, 10, 19), settings=settings)


class TestSegmentLifecycle:
    def test_default_catalog_ids(self) -> None:
        session = _make_session()
        assert [s.instance_id for s in session.segments] == _DEFAULT_IDS

    def test_sessions_do_not_share_counters(self) -> None:
        first = _make_session("cd")
        first.add_segment("ruqSmallBowel")
        second = _make_session()
        assert [s.instance_id for s in second.segments] == _DEFAULT_IDS

    def test_uc_hides_small_bowel(self) -> None:
        session = _make_session()
        assert all(not s.is_small_bowel for s in session.visible_segments())
        assert len(session.visible_segments()) == 6

    def test_cd_shows_all_segments(self) -> None:
        session = _make_session("cd")
        assert len(session.visible_segments()) == 7

    def test_add_segment(self) -> None:
        session = _make_session("cd")
        added = session.add_segment("ruqSmallBowel")
        assert added.instance_id == "ruqSmallBowel-8"
        assert added.label == "Right upper quadrant"
        assert added.is_dynamic and added.is_small_bowel
        assert session.segments[-1] == added

    def test_same_target_added_twice_gets_distinct_ids(self) -> None:
        session = _make_session("cd")
        first = session.add_segment("suprapubicSmallBowel")
        second = session.add_segment("suprapubicSmallBowel")
        assert first.instance_id != second.instance_id

    def test_add_unknown_segment(self) -> None:
        session = _make_session("cd")
        with pytest.raises(SegmentCatalogError) as exc_info:
            session.add_segment("rectum")
        assert exc_info.value.segment_id == "rectum"

    def test_remove_dynamic_segment(self) -> None:
        session = _make_session("cd")
        added = session.add_segment("epigastricSmallBowel")
        session.remove_segment(added.instance_id)
        assert [s.instance_id for s in session.segments] == _DEFAULT_IDS

    def test_remove_fixed_segment_rejected(self) -> None:
        session = _make_session()
        with pytest.raises(SessionError):
            session.remove_segment("rectum-1")
        assert len(session.segments) == 7

    def test_remove_unknown_instance(self) -> None:
        with pytest.raises(SessionError):
            _make_session().remove_segment("missing-99")

    def test_update_segment(self) -> None:
        session = _make_session()
        updated = session.update_segment("sigmoid-2", bowel_wall_thickness=4.2, doppler_grade=2)
        assert updated.instance_id == "sigmoid-2"
        assert session.get_segment("sigmoid-2").bowel_wall_thickness == 4.2
        assert session.segments[1] is updated

    def test_update_rejects_identity_change(self) -> None:
        with pytest.raises(SessionError):
            _make_session().update_segment("sigmoid-2", instanceId="other")

    def test_update_validates_values(self) -> None:
        session = _make_session()
        with pytest.raises(ValidationError):
            session.update_segment("sigmoid-2", doppler_grade=5)
        assert session.get_segment("sigmoid-2").doppler_grade is None

    def test_set_profile(self) -> None:
        session = _make_session()
        session.set_profile("cd")
        assert session.profile is DiseaseProfile.CD


class TestOverallVisualization:
    def test_not_visualized_marks_every_segment(self) -> None:
        session = _make_session()
        session.apply_overall_visualization(VisualizationQuality.NOT_VISUALIZED)
        assert all(s.not_visualised for s in session.segments)
        assert {s.visualization_impairment_reason for s in session.segments} == {"Body habitus"}
        assert session.overall_quality is VisualizationQuality.NOT_VISUALIZED
        assert session.overall_reason == "Body habitus"

    def test_impaired_leaves_not_visualised_segments(self) -> None:
        session = _make_session()
        session.update_segment("caecum-6", not_visualised=True, visualization_impairment_reason="Gas")
        session.apply_overall_visualization("impaired", "Patient discomfort")

        caecum = session.get_segment("caecum-6")
        assert caecum.not_visualised is True
        assert caecum.visualization_impairment_reason == "Gas"
        rectum = session.get_segment("rectum-1")
        assert rectum.visualization_override is VisualizationQuality.IMPAIRED
        assert rectum.visualization_impairment_reason == "Patient discomfort"

    def test_good_clears_overrides(self) -> None:
        session = _make_session()
        session.apply_overall_visualization("impaired", "Body habitus")
        session.apply_overall_visualization("good", "ignored")
        rectum = session.get_segment("rectum-1")
        assert rectum.visualization_override is None
        assert rectum.visualization_impairment_reason is None
        assert session.overall_reason == "ignored"

    def test_update_reason_only(self) -> None:
        session = _make_session()
        session.apply_overall_visualization("impaired", "Body habitus")
        session.update_segment("sigmoid-2", visualization_override=None, visualization_impairment_reason=None)
        session.apply_overall_visualization("impaired", "Patient discomfort", update_reason_only=True)

        assert session.get_segment("rectum-1").visualization_impairment_reason == "Patient discomfort"
        sigmoid = session.get_segment("sigmoid-2")
        assert sigmoid.visualization_override is None
        assert sigmoid.visualization_impairment_reason is None

    def test_blank_reason_uses_default(self) -> None:
        session = _make_session()
        session.apply_overall_visualization("impaired", "   ")
        assert session.get_segment("rectum-1").visualization_impairment_reason == "Body habitus"


class TestSessionReport:
    def test_report_text(self) -> None:
        session = _make_session()
        session.indication = "Assess response to therapy"
        session.update_segment("rectum-1", bowel_wall_thickness=2)
        text = session.report_text()
        assert text.startswith(
            "Date: Monday, Oct 19, 2026\nIndication: Assess response to therapy\nImaging quality: Good\n"
        )
        assert "• Rectum: Milan score 3.0; BWT 2.0mm" in text
        assert "• Terminal ileum" not in text

    def test_insights_follow_profile(self) -> None:
        session = _make_session("cd")
        session.update_segment("terminalIleum-7", bowel_wall_thickness=5, doppler_grade=2, fat_wrapping=True)
        assert session.insights().highest_status_label == "active disease"

    def test_reset(self) -> None:
        session = _make_session("cd")
        session.indication = "Follow-up"
        session.add_segment("ruqSmallBowel")
        session.apply_overall_visualization("impaired")
        session.reset()

        assert [s.label for s in session.segments][-1] == "Terminal ileum"
        assert len(session.segments) == 7
        assert session.indication == ""
        assert session.overall_quality is None
        assert all(s.visualization_override is None for s in session.segments)
