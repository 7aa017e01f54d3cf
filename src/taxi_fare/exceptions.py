"""Exception hierarchy for fare calculation."""

from typing import Any


class FareError(Exception):
    """Base exception for all fare calculation errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class FormatError(FareError):
    """Drive log line, time token or distance token is malformed."""

    pass
