"""
Domain errors raised by the request pipelines.

Every failure carries the HTTP status it maps to and a message that is
reported verbatim to the caller.
"""

from typing import Any, Optional


class GrubDashError(Exception):
    """Base class for request failures."""

    status_code: int = 500

    def __init__(self, message: str, errors: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        """Convert to the JSON error body."""
        content = {"error": self.message}
        if self.errors:
            content["errors"] = self.errors
        return content


class InvalidRequest(GrubDashError):
    """Malformed, missing or inconsistent input."""

    status_code = 400


class NotFound(GrubDashError):
    """The referenced record does not exist."""

    status_code = 404
