"""
MCP server configuration.

Loads server settings from .linear-issues/mcp-config.yaml, with environment
variables taking precedence over the file.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Optional

import yaml

from linear_issues.mcp.auth import LINEAR_API_KEY_ENV
from linear_issues.mcp.graphql import LINEAR_API_URL

CONFIG_DIR = ".linear-issues"
CONFIG_FILE = "mcp-config.yaml"

# Environment variable -> config field
_ENV_OVERRIDES = {
    "MCP_SERVER_HOST": "host",
    "MCP_SERVER_TRANSPORT": "transport",
    "LINEAR_API_URL": "api_url",
    LINEAR_API_KEY_ENV: "linear_api_key",
    "LINEAR_MCP_LOG_LEVEL": "log_level",
}


@dataclass
class MCPConfig:
    """
    Server configuration loaded from .linear-issues/mcp-config.yaml.

    Attributes:
        host: Server bind address (default: "127.0.0.1")
        port: Server port for SSE transport (default: 8000)
        transport: Transport mode ("stdio" or "sse", default: "stdio")
        api_url: Linear GraphQL endpoint
        linear_api_key: Linear API key (normally supplied via LINEAR_API_KEY)
        log_level: Root log level for the server process
    """

    host: str = "127.0.0.1"
    port: int = 8000
    transport: Literal["stdio", "sse"] = "stdio"
    api_url: str = LINEAR_API_URL
    linear_api_key: Optional[str] = None
    log_level: str = "INFO"

    @staticmethod
    def config_path(project_path: Path) -> Path:
        return project_path / CONFIG_DIR / CONFIG_FILE

    @classmethod
    def load(cls, project_path: Path) -> "MCPConfig":
        """
        Load configuration for a project directory.

        Falls back to defaults if the file doesn't exist. Environment variables
        override config file values.

        Raises:
            ValueError: If the config file or MCP_SERVER_PORT is invalid
        """
        config_file = cls.config_path(project_path)
        config_dict = {}

        if config_file.exists():
            try:
                with open(config_file) as f:
                    config_dict = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
            if not isinstance(config_dict, dict):
                raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping")

        for env_name, field_name in _ENV_OVERRIDES.items():
            if env_name in os.environ:
                config_dict[field_name] = os.environ[env_name]

        if "MCP_SERVER_PORT" in os.environ:
            try:
                config_dict["port"] = int(os.environ["MCP_SERVER_PORT"])
            except ValueError:
                raise ValueError(
                    f"Invalid MCP_SERVER_PORT: {os.environ['MCP_SERVER_PORT']}. "
                    "Must be an integer."
                )

        return cls(**{k: v for k, v in config_dict.items() if k in cls.__annotations__})

    def save(self, project_path: Path):
        """
        Write configuration to .linear-issues/mcp-config.yaml.

        The Linear API key is never written; it should come from LINEAR_API_KEY.
        """
        config_file = self.config_path(project_path)
        config_file.parent.mkdir(parents=True, exist_ok=True)

        config_dict = {
            "host": self.host,
            "port": self.port,
            "transport": self.transport,
            "api_url": self.api_url,
            "log_level": self.log_level,
        }

        with open(config_file, "w") as f:
            yaml.dump(config_dict, f, default_flow_style=False, sort_keys=False)

    def masked_api_key(self) -> str:
        if not self.linear_api_key:
            return "(not set)"
        return f"{self.linear_api_key[:8]}…"
