"""
Processing errors raised between the upload store and the completion call.

Every error carries a ``stage`` tag so the logs can tell a missing file from a
broken PDF or a failed model call. Callers over HTTP only ever see the fixed
per-endpoint message.
"""
from __future__ import annotations


class ResumeProcessingError(Exception):
    stage = "unknown"

    def __init__(self, message: str = "", handle: str | None = None):
        super().__init__(message or self.__class__.__name__)
        self.handle = handle


class StoredFileNotFound(ResumeProcessingError):
    """The handle does not map to a file inside the upload directory."""
    stage = "storage"


class ExtractionError(ResumeProcessingError):
    stage = "extraction"


class CompletionError(ResumeProcessingError):
    stage = "completion"
