"""
Shared fixtures: a fake MCP session wired into the real MCPClient, so
command tests run the real argument filtering and JSON decoding without
spawning a server.
"""

import json
import os
from dataclasses import dataclass
from datetime import timedelta
from typing import Any, Optional

import pytest
from click.testing import CliRunner
from mcp.types import (
    CallToolResult, GetPromptResult, ListPromptsResult, ListResourcesResult,
    ListToolsResult, Prompt, PromptMessage, ReadResourceResult, Resource,
    TextContent, TextResourceContents, Tool,
)

from protokoll_cli import display, factory
from protokoll_cli.client import MCPClient


def text_result(payload: Any, is_error: bool = False) -> CallToolResult:
    """CallToolResult whose first block is `payload` (JSON-encoded unless a str)."""
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return CallToolResult(content=[TextContent(type="text", text=text)], isError=is_error)


@dataclass
class RecordedCall:
    name: str
    arguments: dict
    read_timeout_seconds: Optional[Any] = None
    progress_callback: Optional[Any] = None


class FakeSession:
    """Stands in for mcp.ClientSession."""

    def __init__(self):
        self.calls = []
        self.responses = {}

    async def call_tool(self, name, arguments=None, read_timeout_seconds=None, progress_callback=None):
        if read_timeout_seconds is not None and not isinstance(read_timeout_seconds, timedelta):
            raise TypeError(f"read_timeout_seconds must be a timedelta, got {type(read_timeout_seconds).__name__}")
        self.calls.append(RecordedCall(name, arguments, read_timeout_seconds, progress_callback))
        response = self.responses.get(name, {})
        if isinstance(response, Exception):
            raise response
        if isinstance(response, CallToolResult):
            return response
        return text_result(response)

    async def list_tools(self):
        return ListToolsResult(tools=[
            Tool(name="protokoll_list_projects", description="List projects\nwith details", inputSchema={}),
            Tool(name="protokoll_get_version", description=None, inputSchema={}),
        ])

    async def list_resources(self):
        return ListResourcesResult(resources=[
            Resource(uri="protokoll://transcripts", name="transcripts"),
        ])

    async def read_resource(self, uri):
        return ReadResourceResult(contents=[
            TextResourceContents(uri=uri, text="resource body", mimeType="text/plain"),
        ])

    async def list_prompts(self):
        return ListPromptsResult(prompts=[Prompt(name="summarize", description="Summarize a transcript")])

    async def get_prompt(self, name, arguments=None):
        self.calls.append(RecordedCall(name, arguments))
        return GetPromptResult(
            description="Summary prompt",
            messages=[PromptMessage(role="user", content=TextContent(type="text", text="Summarize it"))],
        )

    @property
    def last(self) -> RecordedCall:
        return self.calls[-1]


class FakeClient(MCPClient):
    """Real MCPClient bound to a FakeSession instead of a child process."""

    def __init__(self, session: FakeSession, **options):
        super().__init__(**options)
        self._session = session
        self.disconnect_count = 0

    async def disconnect(self):
        self.disconnect_count += 1
        await super().disconnect()


@pytest.fixture(autouse=True)
def reset_state(monkeypatch):
    for name in list(os.environ):
        if name.startswith("PROTOKOLL_"):
            monkeypatch.delenv(name)
    factory.set_config_path(None)
    display.set_verbose(False)
    yield
    factory.set_config_path(None)
    display.set_verbose(False)


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def fake_client(session, monkeypatch):
    """Patch the factory so every command talks to the FakeSession."""
    clients = []

    async def _create(**overrides):
        client = FakeClient(session, **overrides)
        clients.append(client)
        return client

    monkeypatch.setattr(factory, "create_configured_client", _create)
    return clients


@pytest.fixture
def runner():
    return CliRunner()
