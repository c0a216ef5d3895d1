"""Visualization limitation wording for the impression and report header.

Segments whose impairment reason is the reserved absent reason (a resected
segment, for instance) are left out of every tally here.
"""

from __future__ import annotations

from collections.abc import Sequence

from iuscore.segments.models import SegmentTemplate, VisualizationQuality
from iuscore.segments.visualization import (
    get_visualization_quality,
    has_absent_visualization_reason,
    impairment_reason,
)
from iuscore.synthesis.text import ensure_period, format_list

SATISFACTORY_VISUALIZATION = "Visualization was satisfactory."
GOOD_IMAGING_QUALITY = "Good"
LIMITED_IMAGING_QUALITY = "Visualization was limited."


def _the_label(segment: SegmentTemplate) -> str:
    return f"the {segment.label.lower()}"


def _label_key(segment: SegmentTemplate) -> str:
    return segment.label.lower()


def _reason_key(reason: str) -> tuple[str, str]:
    return reason.casefold(), reason


def build_visualization_statement(segments: Sequence[SegmentTemplate]) -> str:
    """Sentence closing the impression: satisfactory, or which segments limited it."""
    impaired_labels: list[str] = []
    not_visualized_labels: list[str] = []
    reasons: list[str] = []

    for segment in segments:
        if has_absent_visualization_reason(segment):
            continue
        quality = get_visualization_quality(segment)
        if quality is VisualizationQuality.GOOD:
            continue
        if quality is VisualizationQuality.IMPAIRED:
            impaired_labels.append(_the_label(segment))
        else:
            not_visualized_labels.append(_the_label(segment))
        reason = impairment_reason(segment)
        if reason and reason not in reasons:
            reasons.append(reason)

    if not impaired_labels and not not_visualized_labels:
        return SATISFACTORY_VISUALIZATION

    if impaired_labels and not_visualized_labels:
        base = (
            f"The assessment was limited by impaired visualization of the {format_list(impaired_labels)}"
            f" and no visualization of {format_list(not_visualized_labels)}."
        )
    elif impaired_labels:
        base = f"The assessment was limited by impaired visualization of the {format_list(impaired_labels)}."
    else:
        base = f"No visualization of {format_list(not_visualized_labels)}."

    if reasons:
        return f"{base.removesuffix('.')} (Limitations: {format_list(reasons)})."
    return base


def _distinct_reasons(segments: Sequence[SegmentTemplate]) -> list[str]:
    """Reasons in first-seen order, de-duplicated case-insensitively."""
    seen: set[str] = set()
    reasons: list[str] = []
    for segment in segments:
        reason = impairment_reason(segment)
        if not reason or reason.lower() in seen:
            continue
        seen.add(reason.lower())
        reasons.append(reason)
    return reasons


def _with_reason_suffix(text: str, segments: Sequence[SegmentTemplate]) -> str:
    reasons = _distinct_reasons(segments)
    if not reasons:
        return text
    return f"{text} ({format_list(reasons)})"


def _labels(segments: Sequence[SegmentTemplate]) -> str:
    return format_list([_the_label(s) for s in sorted(segments, key=_label_key)])


def summarize_imaging_quality(segments: Sequence[SegmentTemplate]) -> str:
    """Imaging-quality line of the report header.

    A colon that is entirely not visualised, entirely impaired or entirely
    limited collapses into one sentence; the remaining affected segments are
    grouped by impairment reason.
    """
    relevant = [s for s in segments if not has_absent_visualization_reason(s)]
    qualities = [get_visualization_quality(s) for s in relevant]

    if all(q is VisualizationQuality.GOOD for q in qualities):
        return GOOD_IMAGING_QUALITY

    colon = [(i, s) for i, s in enumerate(relevant) if not s.is_small_bowel]
    colon_impaired = [s for i, s in colon if qualities[i] is VisualizationQuality.IMPAIRED]
    colon_not_visualized = [s for i, s in colon if qualities[i] is VisualizationQuality.NOT_VISUALIZED]

    statements: list[str] = []
    handled: set[int] = set()

    if colon and len(colon_not_visualized) == len(colon):
        statements.append(ensure_period(
            _with_reason_suffix("No visualization of the entire colon", colon_not_visualized)
        ))
        handled.update(i for i, _ in colon)
    elif colon and len(colon_impaired) == len(colon):
        statements.append(ensure_period(
            _with_reason_suffix("Visualization of the entire colon was impaired", colon_impaired)
        ))
        handled.update(i for i, _ in colon)
    elif colon and all(qualities[i] is not VisualizationQuality.GOOD for i, _ in colon):
        statements.append(ensure_period(
            _with_reason_suffix(
                "Visualization across the entire colon was limited", [s for _, s in colon]
            )
        ))
        handled.update(i for i, _ in colon)

    reason_groups: dict[str, dict[VisualizationQuality, list[SegmentTemplate]]] = {}
    impaired_no_reason: list[SegmentTemplate] = []
    not_visualized_no_reason: list[SegmentTemplate] = []

    for i, segment in enumerate(relevant):
        quality = qualities[i]
        if quality is VisualizationQuality.GOOD or i in handled:
            continue
        reason = impairment_reason(segment)
        if reason:
            group = reason_groups.setdefault(
                reason,
                {VisualizationQuality.IMPAIRED: [], VisualizationQuality.NOT_VISUALIZED: []},
            )
            group[quality].append(segment)
        elif quality is VisualizationQuality.IMPAIRED:
            impaired_no_reason.append(segment)
        else:
            not_visualized_no_reason.append(segment)

    for reason in sorted(reason_groups, key=_reason_key):
        group = reason_groups[reason]
        if group[VisualizationQuality.IMPAIRED]:
            statements.append(ensure_period(
                f"Impaired visualization of {_labels(group[VisualizationQuality.IMPAIRED])} ({reason})"
            ))
        if group[VisualizationQuality.NOT_VISUALIZED]:
            statements.append(ensure_period(
                f"No visualization of {_labels(group[VisualizationQuality.NOT_VISUALIZED])} ({reason})"
            ))

    if impaired_no_reason:
        statements.append(ensure_period(f"Impaired visualization of {_labels(impaired_no_reason)}"))
    if not_visualized_no_reason:
        statements.append(ensure_period(f"No visualization of {_labels(not_visualized_no_reason)}"))

    return " ".join(statements).strip() or LIMITED_IMAGING_QUALITY


__all__ = [
    "SATISFACTORY_VISUALIZATION",
    "GOOD_IMAGING_QUALITY",
    "build_visualization_statement",
    "summarize_imaging_quality",
]
