"""Load exam snapshots exported by the reporting UI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
from pydantic.alias_generators import to_camel

from iuscore.exceptions import ExamLoadError
from iuscore.segments.models import DiseaseProfile, Segment

log = logging.getLogger(__name__)


class ExamFile(BaseModel):
    """An exam snapshot: profile, header fields and the segment list."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    profile: DiseaseProfile = DiseaseProfile.UC
    indication: str = ""
    date: Optional[str] = None
    segments: list[Segment] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_instance_ids(self) -> ExamFile:
        seen: set[str] = set()
        for segment in self.segments:
            if segment.instance_id in seen:
                raise ValueError(f"duplicate instance id {segment.instance_id!r}")
            seen.add(segment.instance_id)
        return self

    def visible_segments(self) -> list[Segment]:
        if self.profile is DiseaseProfile.UC:
            return [s for s in self.segments if not s.is_small_bowel]
        return list(self.segments)


def parse_exam(raw: Any, source: str = "") -> ExamFile:
    """Validate decoded JSON; a bare list is taken as the segment list."""
    if isinstance(raw, list):
        raw = {"segments": raw}
    try:
        return ExamFile.model_validate(raw)
    except ValidationError as exc:
        raise ExamLoadError(f"Invalid exam data: {exc}", source=source) from exc


def load_exam(path: Path) -> ExamFile:
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ExamLoadError(f"Could not read exam file {path}: {exc}", source=str(path)) from exc
    exam = parse_exam(raw, source=str(path))
    log.info("Loaded exam %s with %d segments", path, len(exam.segments))
    return exam


__all__ = ["ExamFile", "parse_exam", "load_exam"]
