"""
Tool handlers for Linear operations.

Handlers sit between MCP tool registrations and the Linear GraphQL client,
validating arguments and normalizing results into ToolResponse envelopes.
"""

from .base import BaseHandler, operation
from .issue import EDITABLE_FIELDS, IssueHandler, build_update_input

__all__ = [
    "BaseHandler",
    "operation",
    "EDITABLE_FIELDS",
    "IssueHandler",
    "build_update_input",
]
