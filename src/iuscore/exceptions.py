"""Exception hierarchy for iuscore.

The scoring engine and report composer never raise: incomplete or uncertain
inputs surface as ``None`` scores and fallback phrases.  These exceptions
cover the edges around them (session editing, exam file loading).
"""


class IUScoreError(Exception):
    """Base exception for all iuscore errors."""


class SegmentCatalogError(IUScoreError):
    """Raised when a segment id is not part of the segment catalog."""

    def __init__(self, segment_id: str) -> None:
        super().__init__(f"Unknown segment id: {segment_id!r}")
        self.segment_id = segment_id


class SessionError(IUScoreError):
    """Raised when an exam session edit is not allowed."""


class ExamLoadError(IUScoreError):
    """Exam file could not be read or did not validate."""

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source
