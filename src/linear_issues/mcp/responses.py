"""
Tool response envelope.

Every MCP tool returns ``ToolResponse.to_dict()``: either a success with a
message and an optional JSON payload, or a failure carrying the error class
and the reason.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class ToolResponse:
    """Standardized result format for issue tools."""

    success: bool
    message: str
    data: Optional[Any] = None
    errors: List[str] = field(default_factory=list)
    error_type: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary for MCP response."""
        return {
            "success": self.success,
            "message": self.message,
            "data": self.data,
            "errors": self.errors,
            "error_type": self.error_type,
        }

    @classmethod
    def success_result(
        cls,
        message: str,
        data: Optional[Any] = None,
    ) -> "ToolResponse":
        """Create success result."""
        return cls(success=True, message=message, data=data)

    @classmethod
    def error_result(
        cls,
        message: str,
        errors: Optional[List[str]] = None,
        error_type: Optional[str] = None,
    ) -> "ToolResponse":
        """Create error result."""
        return cls(
            success=False,
            message=message,
            errors=errors or [message],
            error_type=error_type,
        )
