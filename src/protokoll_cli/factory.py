# -*- coding: utf-8 -*-
"""
Client factory - MCP clients built from the loaded configuration.

The configuration is loaded once per process and cached until the
config path changes (via the root --config option).
"""

import os
from contextlib import asynccontextmanager
from typing import Optional

from .client import MCPClient, create_client
from .config import ProtokollConfig, load_config
from .display import set_verbose

_config_cache: Optional[ProtokollConfig] = None
_config_path: Optional[str] = None


def set_config_path(path: Optional[str]):
    """Set the configuration file path (clears the cached config)."""
    global _config_path, _config_cache
    _config_path = path
    _config_cache = None


def get_config() -> ProtokollConfig:
    """Return the cached configuration, loading it on first use."""
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config(None, _config_path)
    return _config_cache


async def create_configured_client(**overrides) -> MCPClient:
    """Create a connected MCPClient using the configured server command."""
    config = get_config()
    if config.debug or config.verbose:
        set_verbose(True)
    options = {
        "server_command": config.mcp_server_command,
        "server_args": config.mcp_server_args,
        "workspace_root": os.getcwd(),
    }
    options.update(overrides)
    return await create_client(**options)


@asynccontextmanager
async def open_client(**overrides):
    """
    Connected client for the duration of a block, always disconnected after.

    Usage:
        async with open_client() as client:
            data = await client.call_tool_json("protokoll_list_projects")
    """
    client = await create_configured_client(**overrides)
    try:
        yield client
    finally:
        await client.disconnect()
