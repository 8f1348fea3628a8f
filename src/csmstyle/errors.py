"""Exception hierarchy shared across the pipeline."""

from __future__ import annotations


class CsmStyleError(Exception):
    """Base class for every fatal, user-facing error."""


class InputError(CsmStyleError):
    """Raised when the analysis target is missing or of the wrong kind."""


class ReportWriteError(CsmStyleError):
    """Raised when the report artifact cannot be written."""
