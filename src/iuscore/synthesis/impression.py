"""Auto-generated impression paragraph and the CD headline status."""

from __future__ import annotations

from collections.abc import Sequence

from iuscore.scoring.scores import format_one_decimal
from iuscore.scoring.status import IBUS_ACTIVE_THRESHOLD, get_segment_status
from iuscore.segments.models import (
    DiseaseProfile,
    IbusActivityState,
    SegmentStatus,
    SegmentTemplate,
)
from iuscore.synthesis.models import IbusClassificationEntry
from iuscore.synthesis.text import compose_impression, format_list
from iuscore.synthesis.visualization import build_visualization_statement

NO_ACTIVE_INFLAMMATION = "No sonographic evidence of active bowel inflammation."
INCOMPLETE_IBUS_INPUTS = "IBUS-SAS inputs are incomplete for activity classification."
IBUS_INTERPRETIVE_NOTE = "(An IBUS-SAS score ≥25.2 suggests active transmural disease.)"
SURVEYED_SEGMENTS = "the surveyed segments"

ACTIVE_DISEASE_LABEL = "active disease"
TRANSMURAL_REMISSION_LABEL = "transmural remission"
INACTIVE_DISEASE_LABEL = "inactive disease"


def _entry_score(entry: IbusClassificationEntry) -> float:
    if entry.classification is None or entry.classification.score is None:
        return 0.0
    return entry.classification.score


def _entry_state(entry: IbusClassificationEntry) -> IbusActivityState | None:
    return entry.classification.state if entry.classification is not None else None


def derive_crohns_status_label(entries: Sequence[IbusClassificationEntry]) -> str:
    """Headline CD status over the classified segments."""
    states = [_entry_state(e) for e in entries if e.classification is not None]
    if not states:
        return INACTIVE_DISEASE_LABEL
    if IbusActivityState.ACTIVE in states:
        return ACTIVE_DISEASE_LABEL
    if all(state is IbusActivityState.REMISSION for state in states):
        return TRANSMURAL_REMISSION_LABEL
    return INACTIVE_DISEASE_LABEL


def _uc_impression(highest: SegmentStatus, segments: Sequence[SegmentTemplate]) -> str:
    if highest is SegmentStatus.UNINVOLVED:
        return NO_ACTIVE_INFLAMMATION
    focus = [
        s.label.lower()
        for s in segments
        if get_segment_status(s, DiseaseProfile.UC) is highest
    ]
    return f"There is {highest.value} inflammation involving {format_list(focus)}."


def _stricture_sentence(segments: Sequence[SegmentTemplate]) -> str:
    details: list[str] = []
    for segment in segments:
        if not (segment.luminal_narrowing or segment.prestenotic_dilatation):
            continue
        parts: list[str] = []
        if segment.luminal_narrowing:
            parts.append("luminal narrowing")
        if segment.prestenotic_dilatation:
            if segment.prestenotic_diameter_mm:
                parts.append(f"prestenotic dilatation {format_one_decimal(segment.prestenotic_diameter_mm)} mm")
            else:
                parts.append("prestenotic dilatation")
        details.append(f"{segment.label.lower()} ({', '.join(parts)})")
    if not details:
        return ""
    return f"There is stricturing disease involving the {'; '.join(details)}."


def _cd_impression(
    entries: Sequence[IbusClassificationEntry],
    segments: Sequence[SegmentTemplate],
) -> str:
    if not any(e.classification is not None for e in entries):
        return INCOMPLETE_IBUS_INPUTS

    active = [e.label.lower() for e in entries if _entry_state(e) is IbusActivityState.ACTIVE]
    highest_score = max((_entry_score(e) for e in entries), default=0.0)
    highest = [
        e.label.lower() for e in entries
        if highest_score > 0 and _entry_score(e) == highest_score
    ]
    activity_segments = active or highest or [SURVEYED_SEGMENTS]

    if highest_score >= IBUS_ACTIVE_THRESHOLD or active:
        activity = (
            f"There is likely active inflammation in {format_list(activity_segments)}, "
            f"with the highest IBUS-SAS score {format_one_decimal(highest_score)}."
        )
    else:
        activity = (
            "Active inflammation is unlikely based on IBUS-SAS, with the highest score "
            f"{format_one_decimal(highest_score)} among the surveyed segments."
        )

    sentences = [activity, IBUS_INTERPRETIVE_NOTE]
    stricture = _stricture_sentence(segments)
    if stricture:
        sentences.append(stricture)
    return " ".join(sentences)


def build_auto_impression(
    profile: DiseaseProfile,
    segments: Sequence[SegmentTemplate],
    *,
    uc_highest_severity: SegmentStatus = SegmentStatus.UNINVOLVED,
    ibus_classifications: Sequence[IbusClassificationEntry] = (),
) -> str:
    """Impression paragraph ending with the visualization statement."""
    visualization = build_visualization_statement(segments)
    if DiseaseProfile(profile) is DiseaseProfile.UC:
        primary = _uc_impression(uc_highest_severity, segments)
    else:
        primary = _cd_impression(ibus_classifications, segments)
    return compose_impression(primary, visualization)


__all__ = [
    "NO_ACTIVE_INFLAMMATION",
    "INCOMPLETE_IBUS_INPUTS",
    "IBUS_INTERPRETIVE_NOTE",
    "derive_crohns_status_label",
    "build_auto_impression",
]
