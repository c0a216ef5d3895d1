"""Quick calculator: score a single ad-hoc segment outside a full exam."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from iuscore.scoring.scores import format_one_decimal, get_ibus_score, get_milan_score
from iuscore.scoring.status import classify_ibus_activity, get_segment_status
from iuscore.segments.models import (
    DiseaseProfile,
    IbusActivityState,
    Segment,
    SegmentStatus,
    SegmentTemplate,
    Stratification,
)


class ScoreTone(str, Enum):
    MUTED = "muted"
    POSITIVE = "positive"
    CAUTION = "caution"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class ScoreSummary:
    """Headline score with an interpretive sentence."""

    label: str
    description: str
    tone: ScoreTone
    value: Optional[str] = None


_IBUS_STATE_SUMMARY = {
    IbusActivityState.REMISSION: ("Consistent with transmural remission.", ScoreTone.POSITIVE),
    IbusActivityState.INACTIVE: ("Consistent with inactive disease.", ScoreTone.CAUTION),
    IbusActivityState.ACTIVE: ("Suggestive of active inflammation.", ScoreTone.NEGATIVE),
}


def create_quick_calculator_segment(profile: DiseaseProfile) -> Segment:
    """Seed segment for the quick calculator of *profile*."""
    profile = DiseaseProfile(profile)
    is_crohns = profile is DiseaseProfile.CD
    return Segment(
        id="terminalIleum" if is_crohns else "sigmoid",
        label="Quick IBUS-SAS segment" if is_crohns else "Quick Milan segment",
        instance_id=f"quick-{profile.value}",
        is_small_bowel=is_crohns,
        doppler_grade=0,
        stratification=Stratification.NORMAL if is_crohns else None,
        fat_wrapping=False if is_crohns else None,
    )


def build_score_summary(segment: SegmentTemplate, profile: DiseaseProfile) -> ScoreSummary:
    profile = DiseaseProfile(profile)
    label = "Milan score" if profile is DiseaseProfile.UC else "IBUS-SAS score"

    if segment.not_visualised:
        return ScoreSummary(label=label, description="Segment not visualized", tone=ScoreTone.MUTED)

    if profile is DiseaseProfile.UC:
        score = get_milan_score(segment)
        if score is None:
            return ScoreSummary(
                label=label,
                description="Enter BWT and Doppler inputs to calculate the Milan score.",
                tone=ScoreTone.MUTED,
            )
        inactive = get_segment_status(segment, profile) is SegmentStatus.UNINVOLVED
        return ScoreSummary(
            label=label,
            value=format_one_decimal(score),
            description=(
                "Consistent with inactive disease." if inactive else "Suggestive of active inflammation."
            ),
            tone=ScoreTone.POSITIVE if inactive else ScoreTone.NEGATIVE,
        )

    score = get_ibus_score(segment)
    classification = classify_ibus_activity(segment)
    if score is None or classification is None:
        return ScoreSummary(
            label=label,
            description="Enter transmural activity inputs to calculate the IBUS-SAS score.",
            tone=ScoreTone.MUTED,
        )

    description, tone = _IBUS_STATE_SUMMARY[classification.state]
    return ScoreSummary(label=label, value=format_one_decimal(score), description=description, tone=tone)


__all__ = [
    "ScoreTone",
    "ScoreSummary",
    "create_quick_calculator_segment",
    "build_score_summary",
]
