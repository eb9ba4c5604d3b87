"""
MCP (Model Context Protocol) server for Linear issues.

Lets a tool-calling agent create, edit, search and delete Linear issues.

Architecture:
- server.py: FastMCP server initialization and tool registration
- config.py: Configuration file and environment loading
- tools/: MCP tool definitions
- handlers/: Issue operations (validation, delegation, response shaping)
- graphql/: Linear GraphQL client and query documents
- auth/: Linear API key handling
"""

__all__ = ["MCPServer", "MCPConfig"]

from .config import MCPConfig
from .server import MCPServer
