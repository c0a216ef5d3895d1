"""Tests for loading exported exam files."""

from __future__ import annotations

import json

import pytest

from iuscore.exceptions import ExamLoadError
from iuscore.segments.models import DiseaseProfile
from iuscore.services.exam_loader import load_exam, parse_exam

_SEGMENTS = [
    {"id": "rectum", "label": "Rectum", "instanceId": "rectum-1", "bowelWallThickness": 4.2, "dopplerGrade": 1},
    {"id": "terminalIleum", "label": "Terminal ileum", "instanceId": "terminalIleum-7", "isSmallBowel": True},
]


class TestParseExam:
    def test_exam_object(self) -> None:
        exam = parse_exam(
            {"profile": "cd", "indication": "Follow-up", "date": "Monday, Oct 19, 2026", "segments": _SEGMENTS}
        )
        assert exam.profile is DiseaseProfile.CD
        assert exam.indication == "Follow-up"
        assert exam.date == "Monday, Oct 19, 2026"
        assert exam.segments[0].bowel_wall_thickness == 4.2
        assert len(exam.visible_segments()) == 2

    def test_bare_segment_list_defaults_to_uc(self) -> None:
        exam = parse_exam(_SEGMENTS)
        assert exam.profile is DiseaseProfile.UC
        assert exam.date is None
        assert [s.label for s in exam.visible_segments()] == ["Rectum"]

    def test_duplicate_instance_ids(self) -> None:
        with pytest.raises(ExamLoadError, match="duplicate instance id"):
            parse_exam([_SEGMENTS[0], _SEGMENTS[0]])

    def test_invalid_values(self) -> None:
        bad = [{**_SEGMENTS[0], "dopplerGrade": 7}]
        with pytest.raises(ExamLoadError) as exc_info:
            parse_exam(bad, source="exam.json")
        assert exc_info.value.source == "exam.json"


class TestLoadExam:
    def test_load_from_file(self, tmp_path) -> None:
        path = tmp_path / "exam.json"
        path.write_text(json.dumps({"profile": "uc", "segments": _SEGMENTS}), encoding="utf-8")
        exam = load_exam(path)
        assert len(exam.segments) == 2

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ExamLoadError, match="Could not read exam file"):
            load_exam(tmp_path / "missing.json")

    def test_malformed_json(self, tmp_path) -> None:
        path = tmp_path / "exam.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ExamLoadError) as exc_info:
            load_exam(path)
        assert exc_info.value.source == str(path)
