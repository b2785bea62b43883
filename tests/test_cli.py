"""Tests for the root command group, version and the error boundary."""

from mcp.types import CallToolResult, ImageContent

from protokoll_cli import display, factory
from protokoll_cli.commands import cli
from protokoll_cli.exceptions import ConnectionFailedError


def test_help_lists_command_groups(runner):
    result = runner.invoke(cli, [])
    assert result.exit_code == 0
    for name in ("transcript", "project", "task", "status", "process", "migrate", "tools"):
        assert name in result.output


def test_version_option(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "protokoll, version 0.1.0" in result.output


class TestVersionCommand:

    def test_shows_cli_and_server_versions(self, runner, session, fake_client):
        session.responses["protokoll_get_version"] = "Server v1.2.3"
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert session.last.name == "protokoll_get_version"
        assert "Protokoll CLI: 0.1.0" in result.output
        assert "MCP Server:" in result.output
        assert "Server v1.2.3" in result.output
        assert fake_client[0].disconnect_count == 1

    def test_fallback_when_server_returns_nothing(self, runner, session, fake_client):
        session.responses["protokoll_get_version"] = CallToolResult(content=[])
        result = runner.invoke(cli, ["version"])
        assert "No version information returned from server" in result.output

    def test_non_text_block_prints_nothing_after_header(self, runner, session, fake_client):
        session.responses["protokoll_get_version"] = CallToolResult(
            content=[ImageContent(type="image", data="AAAA", mimeType="image/png")]
        )
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 0
        assert result.output.rstrip().endswith("MCP Server:")
        assert "No version information" not in result.output

    def test_server_error_exits_1(self, runner, session, fake_client):
        session.responses["protokoll_get_version"] = RuntimeError("Server unavailable")
        result = runner.invoke(cli, ["version"])

        assert result.exit_code == 1
        assert "Error: Server unavailable" in result.output
        assert fake_client[0].disconnect_count == 1


class TestRootOptions:

    def test_config_option_sets_path(self, runner, fake_client, monkeypatch):
        seen = []
        monkeypatch.setattr("protokoll_cli.commands.set_config_path", seen.append)
        runner.invoke(cli, ["--config", "/my/config.yaml", "version"])
        assert seen == ["/my/config.yaml"]

    def test_no_config_option_resets_path(self, runner, fake_client, monkeypatch):
        seen = []
        monkeypatch.setattr("protokoll_cli.commands.set_config_path", seen.append)
        runner.invoke(cli, ["version"])
        assert seen == [None]

    def test_verbose_flag(self, runner, fake_client):
        runner.invoke(cli, ["--verbose", "version"])
        assert display.is_verbose() is True


def test_connection_failure_shows_hint(runner, monkeypatch):
    async def failing(**overrides):
        raise ConnectionFailedError(
            "Failed to connect to MCP server: not found",
            hint="Is 'protokoll-mcp' installed and on your PATH?",
        )

    monkeypatch.setattr(factory, "create_configured_client", failing)
    result = runner.invoke(cli, ["project", "list"])

    assert result.exit_code == 1
    assert "Error: Failed to connect to MCP server: not found" in result.output
    assert "installed and on your PATH" in result.output


def test_bad_config_file_exits_1(runner, tmp_path):
    bad = tmp_path / "bad.yaml"
    bad.write_text("- not\n- a mapping\n")
    result = runner.invoke(cli, ["--config", str(bad), "batch", str(tmp_path)])
    assert result.exit_code == 1
    assert "Failed to load config from" in result.output
