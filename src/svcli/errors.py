# svcli/errors.py
"""Exception types raised by SVCLI."""
from __future__ import annotations

from typing import Optional


class SvcliError(Exception):
    """Base class for every error SVCLI reports to the user."""


class ParseError(SvcliError):
    """
    The command line or one of the files it points at is unusable.

    This is a user-input problem, not a defect: callers print ``message`` and
    stop the requested operation.  ``cause`` keeps the underlying exception
    (malformed URL, bad JSON, ...) when there is one.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause
