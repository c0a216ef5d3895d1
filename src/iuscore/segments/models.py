"""Segment data model: enums and the per-segment measurement record.

A ``Segment`` is one anatomical bowel region of an exam.  Field names are
snake_case; the camelCase names used by exported exam files are accepted as
aliases, so ``Segment.model_validate({"bowelWallThickness": 4.2, ...})``
works unchanged.
"""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class DiseaseProfile(str, Enum):
    """Scoring schema selected for an exam."""

    UC = "uc"
    CD = "cd"


class SegmentStatus(str, Enum):
    """Severity tier of a segment, in ascending order."""

    UNINVOLVED = "uninvolved"
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)


_SEVERITY_ORDER = [
    SegmentStatus.UNINVOLVED,
    SegmentStatus.MILD,
    SegmentStatus.MODERATE,
    SegmentStatus.SEVERE,
]


class IbusActivityState(str, Enum):
    """IBUS-SAS activity classification of a Crohn's segment."""

    REMISSION = "remission"
    INACTIVE = "inactive"
    ACTIVE = "active"


class VisualizationQuality(str, Enum):
    """How reliably a segment could be assessed."""

    GOOD = "good"
    IMPAIRED = "impaired"
    NOT_VISUALIZED = "notVisualized"


class Stratification(str, Enum):
    """Bowel-wall layering: preserved, or focal/extensive loss."""

    NORMAL = "normal"
    FOCAL = "focal"
    EXTENSIVE = "extensive"

    @property
    def is_disrupted(self) -> bool:
        return self is not Stratification.NORMAL


class SegmentTemplate(BaseModel):
    """Catalog entry and base of every segment record."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        use_enum_values=False,
    )

    id: str
    label: str
    is_small_bowel: bool = False
    is_dynamic: bool = False

    not_visualised: Optional[bool] = None
    bowel_wall_thickness: Optional[float] = Field(default=None, ge=0)
    bwt_uncertain: bool = False
    doppler_grade: Optional[int] = Field(default=None, ge=0, le=3)
    doppler_uncertain: bool = False
    stratification: Optional[Stratification] = None
    stratification_uncertain: bool = False
    fat_wrapping: Optional[bool] = None
    fat_wrapping_uncertain: bool = False
    lymph_nodes: Optional[bool] = None
    notes: Optional[str] = None

    # Crohn's small-bowel findings
    length_cm: Optional[float] = Field(default=None, ge=0)
    luminal_narrowing: Optional[bool] = None
    prestenotic_dilatation: Optional[bool] = None
    prestenotic_diameter_mm: Optional[float] = Field(default=None, ge=0)

    visualization_override: Optional[VisualizationQuality] = None
    visualization_impairment_reason: Optional[str] = None

    @field_validator("visualization_override")
    @classmethod
    def _override_is_manual_state(
        cls, value: Optional[VisualizationQuality]
    ) -> Optional[VisualizationQuality]:
        if value is VisualizationQuality.NOT_VISUALIZED:
            raise ValueError("use not_visualised to mark a segment as not visualized")
        return value


class Segment(SegmentTemplate):
    """A segment occurrence within one exam."""

    instance_id: str = Field(default_factory=lambda: uuid.uuid4().hex)


__all__ = [
    "DiseaseProfile",
    "SegmentStatus",
    "IbusActivityState",
    "VisualizationQuality",
    "Stratification",
    "SegmentTemplate",
    "Segment",
]
