"""Plain-text formatter: the fixed report layout copied into the patient record."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from iuscore.synthesis.models import ExamReport


class TextFormatter:
    """Renders an ExamReport as UTF-8 report text."""

    def format(self, report: ExamReport, **kwargs: Any) -> bytes:
        return report.report_text().encode("utf-8")

    def format_to_file(self, report: ExamReport, path: Path, **kwargs: Any) -> Path:
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "text/plain; charset=utf-8"
