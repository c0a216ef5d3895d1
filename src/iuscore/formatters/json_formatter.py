"""JSON output formatter: structured insights plus the report text."""

from __future__ import annotations

import dataclasses
import json
from pathlib import Path
from typing import Any

from iuscore.synthesis.models import ExamReport


class JSONFormatter:
    """Renders an ExamReport, including its report text, as indented JSON bytes."""

    def format(self, report: ExamReport, **kwargs: Any) -> bytes:
        """Serialize *report* to pretty-printed JSON bytes."""
        payload = dataclasses.asdict(report)
        payload["report_text"] = report.report_text()
        return json.dumps(payload, indent=2, ensure_ascii=False, default=str).encode("utf-8")

    def format_to_file(self, report: ExamReport, path: Path, **kwargs: Any) -> Path:
        """Write JSON to *path* and return it."""
        path.write_bytes(self.format(report, **kwargs))
        return path

    @property
    def content_type(self) -> str:
        return "application/json"
