"""
Tests for MCP CLI commands (start, config).

Tests cover:
- linear-issues mcp start with various options
- Configuration loading and override precedence
- linear-issues mcp config output and exit codes
"""

from unittest.mock import MagicMock, patch

import pytest
from typer.testing import CliRunner

from linear_issues.cli import app as root_app
from linear_issues.cli.commands.mcp import app

runner = CliRunner()


@pytest.fixture
def project_path(tmp_path, monkeypatch):
    """Project directory with .linear-issues/ as the working directory."""
    project = tmp_path / "project"
    (project / ".linear-issues").mkdir(parents=True)
    monkeypatch.chdir(project)
    for name in ("MCP_SERVER_HOST", "MCP_SERVER_PORT", "MCP_SERVER_TRANSPORT", "LINEAR_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return project


class TestMCPStartCommand:
    """Test `linear-issues mcp start` command."""

    @patch("linear_issues.cli.commands.mcp._configure_logging")
    @patch("linear_issues.cli.commands.mcp.MCPServer")
    def test_start_default(self, mock_server_class, _logging, project_path):
        mock_server = MagicMock()
        mock_server_class.return_value = mock_server

        result = runner.invoke(app, ["start"])

        assert result.exit_code == 0
        assert "Starting MCP server" in result.output
        assert "Transport: stdio" in result.output
        assert "LINEAR_API_KEY is not set" in result.output
        mock_server.start.assert_called_once()

    @patch("linear_issues.cli.commands.mcp._configure_logging")
    @patch("linear_issues.cli.commands.mcp.MCPServer")
    def test_start_with_sse_transport(self, mock_server_class, _logging, project_path):
        result = runner.invoke(
            app, ["start", "--transport", "sse", "--host", "0.0.0.0", "--port", "9000"]
        )

        assert result.exit_code == 0
        assert "Listening on 0.0.0.0:9000" in result.output
        kwargs = mock_server_class.call_args.kwargs
        assert kwargs["transport"] == "sse"
        assert kwargs["host"] == "0.0.0.0"
        assert kwargs["port"] == 9000

    @patch("linear_issues.cli.commands.mcp._configure_logging")
    @patch("linear_issues.cli.commands.mcp.MCPServer")
    def test_start_passes_api_key(self, mock_server_class, _logging, project_path, monkeypatch):
        monkeypatch.setenv("LINEAR_API_KEY", "lin_api_env")

        result = runner.invoke(app, ["start"])

        assert result.exit_code == 0
        assert mock_server_class.call_args.kwargs["linear_api_key"] == "lin_api_env"
        assert "LINEAR_API_KEY is not set" not in result.output

    @patch("linear_issues.cli.commands.mcp._configure_logging")
    @patch("linear_issues.cli.commands.mcp.MCPServer")
    def test_cli_overrides_config_file(self, mock_server_class, _logging, project_path):
        (project_path / ".linear-issues" / "mcp-config.yaml").write_text(
            "transport: sse\nport: 9000\n"
        )

        result = runner.invoke(app, ["start", "--port", "9500"])

        assert result.exit_code == 0
        kwargs = mock_server_class.call_args.kwargs
        assert kwargs["transport"] == "sse"
        assert kwargs["port"] == 9500

    @patch("linear_issues.cli.commands.mcp._configure_logging")
    @patch("linear_issues.cli.commands.mcp.MCPServer")
    def test_start_invalid_transport(self, mock_server_class, _logging, project_path):
        mock_server_class.side_effect = ValueError("Invalid transport 'ws'")

        result = runner.invoke(app, ["start", "--transport", "ws"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    @patch("linear_issues.cli.commands.mcp._configure_logging")
    @patch("linear_issues.cli.commands.mcp.MCPServer")
    def test_start_runtime_error(self, mock_server_class, _logging, project_path):
        mock_server_class.return_value.start.side_effect = RuntimeError("Port 8000 already in use")

        result = runner.invoke(app, ["start"])

        assert result.exit_code == 1
        assert "already in use" in result.output


class TestMCPConfigCommand:
    """Test `linear-issues mcp config` command."""

    def test_config_without_api_key(self, project_path):
        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "(not set)" in result.output

    def test_config_masks_api_key(self, project_path, monkeypatch):
        monkeypatch.setenv("LINEAR_API_KEY", "lin_api_0123456789abcdef")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 0
        assert "0123456789abcdef" not in result.output
        assert "stdio" in result.output

    def test_config_invalid_file(self, project_path):
        (project_path / ".linear-issues" / "mcp-config.yaml").write_text("port: [\n")

        result = runner.invoke(app, ["config"])

        assert result.exit_code == 1
        assert "Configuration error" in result.output

    def test_root_app_exposes_mcp_group(self, project_path):
        result = runner.invoke(root_app, ["mcp", "--help"])

        assert result.exit_code == 0
        assert "start" in result.output
        assert "config" in result.output
