"""
FastMCP server initialization and configuration.

Builds the FastMCP app, wires the Linear credentials into the issue
handler, and registers the issue tools. Supports stdio and SSE transports.
"""

import logging
import socket
from dataclasses import dataclass, field
from typing import Literal, Optional

from fastmcp import FastMCP

from linear_issues.mcp.auth import LinearAuth
from linear_issues.mcp.graphql import LINEAR_API_URL
from linear_issues.mcp.handlers import IssueHandler
from linear_issues.mcp.tools import register_issue_tools

logger = logging.getLogger(__name__)


@dataclass
class MCPServer:
    """
    MCP server exposing Linear issue tools.

    Attributes:
        host: Server bind address (default: "127.0.0.1")
        port: Server port (default: 8000, SSE only)
        transport: Transport mode ("stdio" or "sse")
        linear_api_key: Linear API key; without it every tool fails with AuthError
        api_url: Linear GraphQL endpoint
        auth: Prebuilt credentials, overrides linear_api_key/api_url
    """

    host: str = "127.0.0.1"
    port: int = 8000
    transport: Literal["stdio", "sse"] = "stdio"
    linear_api_key: Optional[str] = field(default=None, repr=False)
    api_url: str = LINEAR_API_URL
    auth: Optional[LinearAuth] = field(default=None, repr=False)
    _app: Optional[FastMCP] = field(default=None, init=False, repr=False)

    def __post_init__(self):
        """Validate configuration and build the FastMCP app."""
        if self.transport not in ("stdio", "sse"):
            raise ValueError(
                f"Invalid transport '{self.transport}'. "
                "Must be 'stdio' or 'sse'."
            )

        if self.auth is None:
            self.auth = LinearAuth(api_key=self.linear_api_key, api_url=self.api_url)

        self._app = FastMCP("Linear Issues MCP Server")
        self.issue_handler = IssueHandler(self.auth)
        register_issue_tools(self._app, self.issue_handler)

    def _check_port_available(self, host: str, port: int) -> bool:
        """Return True if host:port can be bound."""
        try:
            with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
                s.bind((host, port))
                return True
        except OSError:
            return False

    def start(self):
        """
        Start the MCP server with the configured transport.

        Raises:
            RuntimeError: If the port is unavailable (SSE) or FastMCP fails to start
        """
        self.auth.log_status(logger)

        if self.transport == "stdio":
            # stdout carries JSON-RPC; host/port are ignored
            try:
                self._app.run()
            except Exception as e:
                raise RuntimeError(f"Failed to start MCP server with stdio transport: {e}") from e
            return

        if not self._check_port_available(self.host, self.port):
            raise RuntimeError(
                f"Port {self.port} already in use. "
                f"Choose a different port or stop the conflicting service."
            )

        logger.info("Serving SSE on %s:%s", self.host, self.port)
        try:
            self._app.run(transport="sse", host=self.host, port=self.port)
        except Exception as e:
            raise RuntimeError(
                f"Failed to start MCP server on {self.host}:{self.port}: {e}"
            ) from e
