"""Output formatter protocol implemented by every report formatter."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from iuscore.synthesis.models import ExamReport


@runtime_checkable
class IOutputFormatter(Protocol):
    """Protocol for report output formatters (plain text, JSON)."""

    def format(self, report: ExamReport, **kwargs: Any) -> bytes:
        """Render the report into output bytes."""
        ...

    def format_to_file(self, report: ExamReport, path: Path, **kwargs: Any) -> Path:
        """Render and write to a file. Returns the output path."""
        ...

    @property
    def content_type(self) -> str:
        """MIME type of the rendered output."""
        ...


__all__ = ["IOutputFormatter"]
