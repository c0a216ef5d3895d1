"""Output formatters for rendering an ExamReport.

Usage::

    from iuscore.formatters import get_formatter

    data = get_formatter("text").format(report)
"""

from __future__ import annotations

from iuscore.formatters.json_formatter import JSONFormatter
from iuscore.formatters.protocols import IOutputFormatter
from iuscore.formatters.text_formatter import TextFormatter

_FORMATTERS: dict[str, type] = {
    "text": TextFormatter,
    "json": JSONFormatter,
}


def get_formatter(name: str) -> IOutputFormatter:
    """Formatter instance registered under *name*."""
    try:
        return _FORMATTERS[name]()
    except KeyError:
        raise ValueError(f"Unknown output format: {name!r}") from None


__all__ = [
    "IOutputFormatter",
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
]
