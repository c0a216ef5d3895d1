"""Tests for segment severity status and IBUS-SAS activity classification."""

from __future__ import annotations

import pytest

from iuscore.scoring.status import (
    IbusClassification,
    classify_ibus_activity,
    get_segment_status,
    is_transmural_remission,
)
from iuscore.segments.models import DiseaseProfile, IbusActivityState, Segment, SegmentStatus


def _make_segment(**fields: object) -> Segment:
    fields.setdefault("id", "terminalIleum")
    fields.setdefault("label", "Terminal ileum")
    return Segment(**fields)


UC = DiseaseProfile.UC
CD = DiseaseProfile.CD


class TestSegmentStatus:
    @pytest.mark.parametrize("profile", [UC, CD])
    def test_not_visualised_is_uninvolved(self, profile: DiseaseProfile) -> None:
        segment = _make_segment(not_visualised=True, bowel_wall_thickness=8, doppler_grade=3)
        assert get_segment_status(segment, profile) is SegmentStatus.UNINVOLVED

    @pytest.mark.parametrize("profile", [UC, CD])
    def test_blank_is_uninvolved(self, profile: DiseaseProfile) -> None:
        assert get_segment_status(_make_segment(), profile) is SegmentStatus.UNINVOLVED

    def test_uc_milan_above_cutoff_falls_through_to_thresholds(self) -> None:
        segment = _make_segment(bowel_wall_thickness=5, doppler_grade=0, stratification="normal")
        assert get_segment_status(segment, UC) is SegmentStatus.MODERATE

    def test_uc_milan_below_cutoff_forces_uninvolved(self) -> None:
        # Milan 6.0 < 6.2 although 4 mm reaches the mild threshold
        segment = _make_segment(bowel_wall_thickness=4, doppler_grade=0)
        assert get_segment_status(segment, UC) is SegmentStatus.UNINVOLVED

    def test_uc_doppler_only_uses_thresholds(self) -> None:
        assert get_segment_status(_make_segment(doppler_grade=2), UC) is SegmentStatus.MODERATE

    def test_uc_uncertain_bwt_skips_milan_cutoff(self) -> None:
        segment = _make_segment(bowel_wall_thickness=2, bwt_uncertain=True, doppler_grade=3)
        assert get_segment_status(segment, UC) is SegmentStatus.SEVERE

    def test_uc_severe_thickness(self) -> None:
        assert get_segment_status(_make_segment(bowel_wall_thickness=6), UC) is SegmentStatus.SEVERE

    def test_uc_stratification_loss_alone_is_mild(self) -> None:
        segment = _make_segment(bowel_wall_thickness=3, stratification="focal")
        assert get_segment_status(segment, UC) is SegmentStatus.MILD

    def test_more_severe_axis_wins(self) -> None:
        segment = _make_segment(bowel_wall_thickness=3.2, doppler_grade=3)
        assert get_segment_status(segment, CD) is SegmentStatus.SEVERE

    @pytest.mark.parametrize(
        ("thickness", "expected"),
        [
            (2.9, SegmentStatus.UNINVOLVED),
            (3.0, SegmentStatus.MILD),
            (4.0, SegmentStatus.MODERATE),
            (5.4, SegmentStatus.MODERATE),
            (5.5, SegmentStatus.SEVERE),
        ],
    )
    def test_cd_thickness_thresholds(self, thickness: float, expected: SegmentStatus) -> None:
        segment = _make_segment(bowel_wall_thickness=thickness, doppler_grade=0)
        assert get_segment_status(segment, CD) is expected

    def test_cd_fat_wrapping_alone_is_mild(self) -> None:
        assert get_segment_status(_make_segment(fat_wrapping=True), CD) is SegmentStatus.MILD

    def test_uncertain_doppler_ignored(self) -> None:
        segment = _make_segment(doppler_grade=3, doppler_uncertain=True)
        assert get_segment_status(segment, CD) is SegmentStatus.UNINVOLVED

    def test_accepts_profile_string(self) -> None:
        assert get_segment_status(_make_segment(bowel_wall_thickness=6), "cd") is SegmentStatus.SEVERE


class TestTransmuralRemission:
    def test_quiescent_segment(self) -> None:
        segment = _make_segment(bowel_wall_thickness=2, fat_wrapping=False)
        assert is_transmural_remission(segment) is True

    def test_normal_stratification_and_zero_doppler(self) -> None:
        segment = _make_segment(bowel_wall_thickness=2.5, doppler_grade=0, stratification="normal")
        assert is_transmural_remission(segment) is True

    @pytest.mark.parametrize(
        "fields",
        [
            {"bowel_wall_thickness": 3.0},
            {"bowel_wall_thickness": 2, "doppler_grade": 1},
            {"bowel_wall_thickness": 2, "stratification": "focal"},
            {"bowel_wall_thickness": 2, "stratification_uncertain": True},
            {"bowel_wall_thickness": 2, "fat_wrapping": True},
            {"bowel_wall_thickness": 2, "fat_wrapping_uncertain": True},
            {"bowel_wall_thickness": 2, "luminal_narrowing": True},
            {"bowel_wall_thickness": 2, "prestenotic_dilatation": True},
            {"bowel_wall_thickness": 2, "bwt_uncertain": True},
            {"bowel_wall_thickness": 2, "not_visualised": True},
            {"doppler_grade": 0},
        ],
    )
    def test_not_remission(self, fields: dict) -> None:
        assert is_transmural_remission(_make_segment(**fields)) is False


class TestClassifyIbusActivity:
    def test_active(self) -> None:
        segment = _make_segment(
            bowel_wall_thickness=3, doppler_grade=2, fat_wrapping=True, stratification="extensive"
        )
        assert classify_ibus_activity(segment) == IbusClassification(IbusActivityState.ACTIVE, 68.0)

    def test_inactive_below_cutoff(self) -> None:
        segment = _make_segment(bowel_wall_thickness=4, doppler_grade=0, stratification="normal")
        assert classify_ibus_activity(segment) == IbusClassification(IbusActivityState.INACTIVE, 16.0)

    def test_cutoff_is_inclusive(self) -> None:
        # 4 * 4.55 + 7 * 1 = 25.2
        segment = _make_segment(bowel_wall_thickness=4.55, doppler_grade=1)
        result = classify_ibus_activity(segment)
        assert result is not None
        assert result.score == 25.2
        assert result.state is IbusActivityState.ACTIVE

    def test_remission_without_score(self) -> None:
        result = classify_ibus_activity(_make_segment(bowel_wall_thickness=2))
        assert result == IbusClassification(IbusActivityState.REMISSION, None)

    def test_remission_with_score(self) -> None:
        result = classify_ibus_activity(_make_segment(bowel_wall_thickness=2, doppler_grade=0))
        assert result == IbusClassification(IbusActivityState.REMISSION, 8.0)

    def test_not_visualised(self) -> None:
        segment = _make_segment(not_visualised=True, bowel_wall_thickness=2)
        assert classify_ibus_activity(segment) is None

    def test_incomplete_inputs(self) -> None:
        assert classify_ibus_activity(_make_segment(bowel_wall_thickness=3.5)) is None
