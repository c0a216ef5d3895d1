"""Segment catalog and fixed vocabulary used by exam sessions."""

from __future__ import annotations

from iuscore.segments.models import SegmentTemplate

# Reserved reason: a segment carrying it is left out of limitation wording.
ABSENT_VISUALIZATION_REASON = "Absent (resected)"

DEFAULT_IMPAIRMENT_REASON = "Body habitus"

DEFAULT_SEGMENTS: tuple[SegmentTemplate, ...] = (
    SegmentTemplate(id="rectum", label="Rectum", not_visualised=False),
    SegmentTemplate(id="sigmoid", label="Sigmoid colon"),
    SegmentTemplate(id="descending", label="Descending colon"),
    SegmentTemplate(id="transverse", label="Transverse colon"),
    SegmentTemplate(id="ascending", label="Ascending colon"),
    SegmentTemplate(id="caecum", label="Caecum"),
    SegmentTemplate(id="terminalIleum", label="Terminal ileum", is_small_bowel=True),
)

CROHNS_ADDITIONAL_SEGMENTS: tuple[SegmentTemplate, ...] = tuple(
    SegmentTemplate(id=segment_id, label=label, is_small_bowel=True, is_dynamic=True)
    for segment_id, label in (
        ("ruqSmallBowel", "Right upper quadrant"),
        ("rlqSmallBowel", "Right lower quadrant"),
        ("suprapubicSmallBowel", "Suprapubic"),
        ("periumbilicalSmallBowel", "Periumbilical"),
        ("epigastricSmallBowel", "Epigastric"),
        ("leftFlankSmallBowel", "Left flank"),
        ("rightFlankSmallBowel", "Right flank"),
    )
)

INDICATION_OPTIONS: tuple[str, ...] = (
    "Disease activity assessment",
    "Symptoms - exclude active inflammation",
    "Assess response to therapy",
    "New patient - baseline investigation",
    "Exclude active inflammatory bowel disease",
)

VISUALIZATION_IMPAIRMENT_OPTIONS: tuple[str, ...] = (
    DEFAULT_IMPAIRMENT_REASON,
    ABSENT_VISUALIZATION_REASON,
    "Patient discomfort",
    "Deep pelvic loop",
)


def find_additional_segment(segment_id: str) -> SegmentTemplate | None:
    """Return the CD-only template with *segment_id*, if any."""
    for template in CROHNS_ADDITIONAL_SEGMENTS:
        if template.id == segment_id:
            return template
    return None


__all__ = [
    "ABSENT_VISUALIZATION_REASON",
    "DEFAULT_IMPAIRMENT_REASON",
    "DEFAULT_SEGMENTS",
    "CROHNS_ADDITIONAL_SEGMENTS",
    "INDICATION_OPTIONS",
    "VISUALIZATION_IMPAIRMENT_OPTIONS",
    "find_additional_segment",
]
