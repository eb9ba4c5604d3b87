"""
Error taxonomy for Linear issue operations.

Every failure raised inside a handler is one of these classes. The handler
error boundary converts them into failure responses, so none of them escape
a tool call.
"""

from typing import Iterable, Optional


class IssueOperationError(Exception):
    """Base exception for issue operation failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class AuthError(IssueOperationError):
    """Raised when no authenticated Linear client is available."""

    def __init__(self, message: str = "Linear client is not authenticated"):
        super().__init__(message)


class ValidationError(IssueOperationError):
    """Raised when tool arguments are missing or have the wrong shape."""

    def __init__(self, message: str, fields: Optional[Iterable[str]] = None):
        self.fields = list(fields or [])
        super().__init__(message)

    @classmethod
    def missing(cls, fields: Iterable[str]) -> "ValidationError":
        """Build the error for a set of missing required parameters."""
        fields = list(fields)
        return cls(
            f"Missing required parameters: {', '.join(fields)}",
            fields=fields,
        )


class NotFoundError(IssueOperationError):
    """Raised when a lookup expected one result and found none."""


class BackendError(IssueOperationError):
    """Raised when Linear reports failure or omits the expected payload."""
