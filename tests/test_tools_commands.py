"""Tests for raw tool, resource and prompt access."""

from protokoll_cli.commands import cli


class TestTools:

    def test_list_shows_first_description_line(self, runner, session, fake_client):
        result = runner.invoke(cli, ["tools", "list"])

        assert result.exit_code == 0
        assert "Tools (2)" in result.output
        assert "protokoll_list_projects" in result.output
        assert "List projects" in result.output
        assert "with details" not in result.output
        assert fake_client[0].disconnect_count == 1

    def test_call_pretty_prints_json(self, runner, session, fake_client):
        session.responses["protokoll_list_projects"] = {"projects": []}
        result = runner.invoke(cli, ["tools", "call", "protokoll_list_projects",
                                     "--args-json", '{"limit": 5, "skip": null}'])

        assert session.last.arguments == {"limit": 5}
        assert '"projects": []' in result.output

    def test_call_prints_plain_text(self, runner, session, fake_client):
        session.responses["protokoll_get_version"] = "1.2.3"
        result = runner.invoke(cli, ["tools", "call", "protokoll_get_version"])
        assert result.output.strip() == "1.2.3"

    def test_call_rejects_bad_json(self, runner, session, fake_client):
        result = runner.invoke(cli, ["tools", "call", "x", "--args-json", "{oops"])

        assert result.exit_code == 1
        assert "--args-json is not valid JSON" in result.output
        assert fake_client == []

    def test_call_rejects_non_object(self, runner, fake_client):
        result = runner.invoke(cli, ["tools", "call", "x", "--args-json", "[1, 2]"])
        assert result.exit_code == 1
        assert "must be a JSON object" in result.output


class TestResources:

    def test_list(self, runner, session, fake_client):
        result = runner.invoke(cli, ["resources", "list"])
        assert "Resources (1):" in result.output
        assert "protokoll://transcripts - transcripts" in result.output

    def test_read(self, runner, session, fake_client):
        result = runner.invoke(cli, ["resources", "read", "protokoll://transcripts"])
        assert result.exit_code == 0
        assert "resource body" in result.output


class TestPrompts:

    def test_list(self, runner, session, fake_client):
        result = runner.invoke(cli, ["prompts", "list"])
        assert "summarize - Summarize a transcript" in result.output

    def test_get_with_arguments(self, runner, session, fake_client):
        result = runner.invoke(cli, ["prompts", "get", "summarize", "--arg", "path=a.md",
                                     "--arg", "style=short"])

        assert session.last.name == "summarize"
        assert session.last.arguments == {"path": "a.md", "style": "short"}
        assert "Summary prompt" in result.output
        assert "[user] Summarize it" in result.output

    def test_get_without_arguments(self, runner, session, fake_client):
        runner.invoke(cli, ["prompts", "get", "summarize"])
        assert session.last.arguments is None

    def test_get_rejects_malformed_pair(self, runner, fake_client):
        result = runner.invoke(cli, ["prompts", "get", "summarize", "--arg", "novalue"])
        assert result.exit_code == 1
        assert "Invalid --arg 'novalue'" in result.output
