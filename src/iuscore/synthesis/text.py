"""Sentence helpers shared by the impression and imaging-quality text."""

from __future__ import annotations

import re
from collections.abc import Sequence

_TERMINAL_PUNCTUATION = re.compile(r"[.!?]$")


def format_list(items: Sequence[str]) -> str:
    """Join with "and", using an Oxford comma for three or more items."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def compose_impression(primary: str, visualization: str) -> str:
    if not visualization:
        return primary
    if not primary:
        return visualization
    return f"{primary} {visualization}"


def ensure_period(text: str) -> str:
    return text if _TERMINAL_PUNCTUATION.search(text) else f"{text}."


__all__ = ["format_list", "compose_impression", "ensure_period"]
