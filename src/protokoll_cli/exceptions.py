# -*- coding: utf-8 -*-
"""
Exception hierarchy for the Protokoll CLI.

Every error the CLI knows how to report inherits from ProtokollError,
so the command runner can print a clean message and exit 1.

    ProtokollError
    ├── ConfigError
    ├── ConnectionFailedError
    ├── NotConnectedError
    ├── ToolError
    ├── InvalidResponseError
    └── MigrationError
"""

from typing import Optional


class ProtokollError(Exception):
    """Base exception for all Protokoll CLI errors."""

    def __init__(self, message: str, *, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class ConfigError(ProtokollError):
    """Raised when a configuration file cannot be read or parsed."""


class ConnectionFailedError(ProtokollError):
    """Raised when the MCP server cannot be spawned or initialized."""


class NotConnectedError(ProtokollError):
    """Raised when a request is made before connect()."""


class ToolError(ProtokollError):
    """Raised when the server flags a tool result as an error."""

    def __init__(self, tool_name: str, message: str, *, hint: Optional[str] = None):
        super().__init__(message, hint=hint)
        self.tool_name = tool_name


class InvalidResponseError(ProtokollError):
    """Raised when a tool returns text that is not valid JSON."""


class MigrationError(ProtokollError):
    """Raised when the entity migration cannot proceed."""
