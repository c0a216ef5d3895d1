"""Shared fixtures for iuscore tests."""

from __future__ import annotations

from datetime import date

import pytest

from iuscore.core.config import AppSettings, ObservabilityConfig, ReportConfig
from iuscore.services.exam_session import ExamSession


@pytest.fixture
def settings() -> AppSettings:
    """Default settings, independent of any IUSCORE_* env vars."""
    return AppSettings(
        report=ReportConfig(
            default_profile="uc",
            default_indication="",
            default_impairment_reason="Body habitus",
            output_format="text",
        ),
        observability=ObservabilityConfig(log_level="INFO", service_name="iuscore-test"),
    )


@pytest.fixture
def exam_date() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def crohns_session(settings: AppSettings, exam_date: date) -> ExamSession:
    """CD session with an active terminal ileum and one added small-bowel loop in remission."""
    session = ExamSession("cd", exam_date=exam_date, settings=settings)
    session.indication = "Assess response to therapy"
    session.update_segment(
        "terminalIleum-7",
        bowel_wall_thickness=6,
        doppler_grade=1,
        luminal_narrowing=True,
        prestenotic_dilatation=True,
        prestenotic_diameter_mm=32,
    )
    loop = session.add_segment("rlqSmallBowel")
    session.update_segment(loop.instance_id, bowel_wall_thickness=2, doppler_grade=0)
    return session
