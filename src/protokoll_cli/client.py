# -*- coding: utf-8 -*-
"""
MCPClient - Communication with the Protokoll MCP server.

The server is spawned as a child process (protokoll-mcp by default) and
spoken to over stdio with the MCP SDK. Its stderr is inherited so that
server-side diagnostics reach the terminal.
"""

import json
import os
import sys
from contextlib import AsyncExitStack
from datetime import timedelta
from typing import Any, Awaitable, Callable, Dict, List, Optional

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client
from mcp.types import CallToolResult, Implementation

from . import __version__, CLIENT_NAME, DEFAULT_SERVER_COMMAND
from .display import log
from .exceptions import (
    ConnectionFailedError, InvalidResponseError, NotConnectedError, ToolError
)

ProgressCallback = Callable[[float, Optional[float], Optional[str]], Awaitable[None]]


def first_text(result: CallToolResult) -> Optional[str]:
    """Return the text of the first content block, if it is a text block."""
    content = getattr(result, "content", None) or []
    if not content:
        return None
    block = content[0]
    if getattr(block, "type", None) != "text":
        return None
    return block.text


class MCPClient:
    """Client for the Protokoll MCP server (stdio transport)."""

    def __init__(
        self,
        server_command: Optional[str] = None,
        server_args: Optional[List[str]] = None,
        workspace_root: Optional[str] = None,
        config_directory: Optional[str] = None,
    ):
        self.server_command = server_command or DEFAULT_SERVER_COMMAND
        self.server_args = list(server_args or [])
        self.workspace_root = workspace_root
        self.config_directory = config_directory
        self._stack: Optional[AsyncExitStack] = None
        self._session: Optional[ClientSession] = None

    @property
    def connected(self) -> bool:
        return self._session is not None

    # =========================================================================
    # Connection
    # =========================================================================

    def build_env(self) -> Dict[str, str]:
        """Environment for the server process: ours plus workspace settings."""
        env = {k: v for k, v in os.environ.items() if v is not None}
        if self.workspace_root:
            env["WORKSPACE_ROOT"] = self.workspace_root
        if self.config_directory:
            env["PROTOKOLL_CONFIG_DIR"] = self.config_directory
        return env

    def server_parameters(self) -> StdioServerParameters:
        return StdioServerParameters(
            command=self.server_command,
            args=self.server_args,
            env=self.build_env(),
        )

    async def connect(self):
        """Spawn the server and perform the MCP handshake (idempotent)."""
        if self._session is not None:
            return

        stack = AsyncExitStack()
        try:
            log("MCPClient", f"Spawning {self.server_command} {' '.join(self.server_args)}".rstrip())
            read, write = await stack.enter_async_context(
                stdio_client(self.server_parameters(), errlog=sys.stderr)
            )
            session = await stack.enter_async_context(
                ClientSession(
                    read, write,
                    client_info=Implementation(name=CLIENT_NAME, version=__version__),
                )
            )
            await session.initialize()
        except Exception as e:
            await self._close_stack(stack)
            raise ConnectionFailedError(
                f"Failed to connect to MCP server: {e}",
                hint=f"Is '{self.server_command}' installed and on your PATH?",
            ) from e

        self._stack = stack
        self._session = session
        log("MCPClient", "Connected", icon="✅")

    async def disconnect(self):
        """Close the session and stop the server. Safe to call twice."""
        stack, self._stack = self._stack, None
        self._session = None
        if stack is not None:
            await self._close_stack(stack)
            log("MCPClient", "Disconnected")

    @staticmethod
    async def _close_stack(stack: AsyncExitStack):
        try:
            await stack.aclose()
        except Exception as e:
            # Teardown errors are logged, never raised
            log("MCPClient", f"Ignoring cleanup error: {e}", icon="⚠️")

    async def __aenter__(self) -> "MCPClient":
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.disconnect()

    def _require_session(self) -> ClientSession:
        if self._session is None:
            raise NotConnectedError("Client not connected. Call connect() first.")
        return self._session

    # =========================================================================
    # Tools
    # =========================================================================

    async def call_tool(
        self,
        name: str,
        args: Optional[Dict[str, Any]] = None,
        progress: Optional[ProgressCallback] = None,
        timeout: Optional[float] = None,
    ) -> CallToolResult:
        """
        Call an MCP tool.

        Args:
            name: Tool name (e.g. "protokoll_read_transcript")
            args: Tool arguments; entries set to None are not sent
            progress: Callback for server progress notifications
            timeout: Read timeout in seconds (SDK default otherwise)

        Returns:
            The raw CallToolResult

        Raises:
            ToolError: if the server flags the result as an error
        """
        session = self._require_session()
        arguments = {k: v for k, v in (args or {}).items() if v is not None}
        read_timeout = timedelta(seconds=timeout) if timeout else None

        log("MCPClient", f"→ {name} {json.dumps(arguments, ensure_ascii=False)}")
        result = await session.call_tool(
            name,
            arguments,
            read_timeout_seconds=read_timeout,
            progress_callback=progress,
        )

        if getattr(result, "isError", False):
            raise ToolError(name, first_text(result) or f"Tool '{name}' failed")
        return result

    async def call_tool_text(self, name: str, args: Optional[Dict[str, Any]] = None, **kwargs) -> Optional[str]:
        """Call a tool and return its first text block (or None)."""
        return first_text(await self.call_tool(name, args, **kwargs))

    async def call_tool_json(self, name: str, args: Optional[Dict[str, Any]] = None, **kwargs) -> Optional[Any]:
        """Call a tool and decode its first text block as JSON (or None)."""
        text = await self.call_tool_text(name, args, **kwargs)
        if text is None:
            return None
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidResponseError(f"Invalid JSON from {name}: {e}") from e

    async def list_tools(self):
        return await self._require_session().list_tools()

    # =========================================================================
    # Resources & prompts
    # =========================================================================

    async def list_resources(self):
        return await self._require_session().list_resources()

    async def read_resource(self, uri: str):
        return await self._require_session().read_resource(uri)

    async def list_prompts(self):
        return await self._require_session().list_prompts()

    async def get_prompt(self, name: str, arguments: Optional[Dict[str, str]] = None):
        return await self._require_session().get_prompt(name, arguments)


async def create_client(**options) -> MCPClient:
    """Create an MCPClient and connect it."""
    client = MCPClient(**options)
    await client.connect()
    return client
