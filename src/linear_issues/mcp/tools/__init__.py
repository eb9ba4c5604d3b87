"""
MCP tool registrations for Linear operations.

Tools translate MCP requests into handler calls and return serialized
ToolResponse envelopes.
"""

from .issue_tools import ISSUE_TOOL_NAMES, register_issue_tools

__all__ = [
    "ISSUE_TOOL_NAMES",
    "register_issue_tools",
]
