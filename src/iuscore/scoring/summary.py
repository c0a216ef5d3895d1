"""One-line findings text for a segment."""

from __future__ import annotations

from iuscore.scoring.scores import format_one_decimal, get_ibus_score, get_milan_score
from iuscore.scoring.status import get_segment_status
from iuscore.segments.models import (
    DiseaseProfile,
    SegmentStatus,
    SegmentTemplate,
    Stratification,
)

_STRATIFICATION_TEXT = {
    Stratification.NORMAL: "Layering preserved",
    Stratification.FOCAL: "Focal stratification loss",
    Stratification.EXTENSIVE: "Extensive stratification loss",
}


def _finding_pieces(segment: SegmentTemplate) -> list[str]:
    pieces: list[str] = []

    if segment.bwt_uncertain:
        pieces.append("BWT uncertain")
    elif segment.bowel_wall_thickness is not None:
        pieces.append(f"BWT {format_one_decimal(segment.bowel_wall_thickness)}mm")

    if segment.doppler_uncertain:
        pieces.append("m-Limberg uncertain")
    elif segment.doppler_grade is not None:
        pieces.append(f"Doppler grade {segment.doppler_grade}")

    if segment.stratification_uncertain:
        pieces.append("Stratification uncertain")
    elif segment.stratification is not None:
        pieces.append(_STRATIFICATION_TEXT[segment.stratification])

    if segment.fat_wrapping_uncertain:
        pieces.append("Mesenteric fat uncertain")
    elif segment.fat_wrapping is not None:
        pieces.append("Mesenteric fat active" if segment.fat_wrapping else "No pre-mesenteric fat signal")

    if segment.lymph_nodes is not None:
        pieces.append(
            "Mesenteric lymph nodes present" if segment.lymph_nodes else "Mesenteric lymph nodes absent"
        )
    if segment.notes:
        pieces.append(segment.notes)
    if segment.length_cm is not None:
        pieces.append(f"Segment length {format_one_decimal(segment.length_cm)}cm")
    if segment.luminal_narrowing:
        pieces.append("Luminal narrowing")
    if segment.prestenotic_dilatation:
        if segment.prestenotic_diameter_mm:
            pieces.append(f"Prestenotic dilatation {format_one_decimal(segment.prestenotic_diameter_mm)}mm")
        else:
            pieces.append("Prestenotic dilatation")

    return pieces


def segment_summary(segment: SegmentTemplate, profile: DiseaseProfile) -> str:
    """``"<label>: <finding>; <finding>; ..."`` led by the profile's score.

    UC summaries lead with the Milan score and, when involved, the Milan
    severity; CD summaries lead with the IBUS-SAS score.
    """
    if segment.not_visualised:
        return f"{segment.label}: not visualized"

    profile = DiseaseProfile(profile)
    pieces = _finding_pieces(segment)

    if profile is DiseaseProfile.UC:
        lead: list[str] = []
        milan_score = get_milan_score(segment)
        if milan_score is not None:
            lead.append(f"Milan score {format_one_decimal(milan_score)}")
        status = get_segment_status(segment, profile)
        if status is not SegmentStatus.UNINVOLVED:
            lead.append(f"Milan {status.value}")
        pieces = lead + pieces
    else:
        ibus_score = get_ibus_score(segment)
        if ibus_score is not None:
            pieces.insert(0, f"IBUS-SAS score {format_one_decimal(ibus_score)}")

    if not pieces:
        return f"{segment.label}: normal"
    return f"{segment.label}: {'; '.join(pieces)}"


__all__ = ["segment_summary"]
