"""Scoring engine: Milan, IBUS-SAS, severity status and activity classification.

Every function here is pure and total over valid segments; missing or
uncertain inputs yield ``None`` rather than an exception.
"""

from __future__ import annotations

from iuscore.scoring.quick import ScoreSummary, build_score_summary, create_quick_calculator_segment
from iuscore.scoring.scores import format_one_decimal, get_ibus_score, get_milan_score, round_one_decimal
from iuscore.scoring.status import (
    IBUS_ACTIVE_THRESHOLD,
    MILAN_INACTIVE_THRESHOLD,
    IbusClassification,
    classify_ibus_activity,
    get_segment_status,
    is_transmural_remission,
)
from iuscore.scoring.summary import segment_summary

__all__ = [
    "IBUS_ACTIVE_THRESHOLD",
    "MILAN_INACTIVE_THRESHOLD",
    "IbusClassification",
    "ScoreSummary",
    "build_score_summary",
    "classify_ibus_activity",
    "create_quick_calculator_segment",
    "format_one_decimal",
    "get_ibus_score",
    "get_milan_score",
    "get_segment_status",
    "is_transmural_remission",
    "round_one_decimal",
    "segment_summary",
]
