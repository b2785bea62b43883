# -*- coding: utf-8 -*-
"""
Shared plumbing for the Click commands.

Every remote command follows the same shape: open a client, call one
tool, print selected fields, close. `run` is the single error boundary:
known errors print `Error: ...` on stderr and exit 1.
"""

import asyncio
import sys
from typing import Any, Dict, List, Optional

import click
from rich.markup import escape
from rich.prompt import Confirm

from ..display import console, show_error
from ..exceptions import InvalidResponseError, ProtokollError
from ..factory import get_config, open_client

EXIT_ERROR = 1
EXIT_INTERRUPTED = 130


def fail(message: str, hint: str = None):
    show_error(message, hint)
    sys.exit(EXIT_ERROR)


def run(coro):
    """Run a coroutine, turning errors into a message and exit code 1."""
    try:
        return asyncio.run(coro)
    except ProtokollError as e:
        fail(str(e), e.hint)
    except KeyboardInterrupt:
        console.print("[dim]Interrupted.[/dim]")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        fail(str(e) or type(e).__name__)


def current_config():
    """Loaded configuration, or exit 1 with the config error."""
    try:
        return get_config()
    except ProtokollError as e:
        fail(str(e), e.hint)


def call_json(tool: str, args: Optional[Dict[str, Any]] = None, **kwargs) -> Optional[Any]:
    """Open a client, call one tool, return its decoded JSON object (or None)."""
    async def _call():
        async with open_client() as client:
            data = await client.call_tool_json(tool, args, **kwargs)
        if data is not None and not isinstance(data, dict):
            raise InvalidResponseError(f"Unexpected response from {tool}: expected a JSON object")
        return data
    return run(_call())


def non_empty(values) -> Optional[List[str]]:
    """Repeated option values, or None when the option was not used."""
    return list(values) if values else None


def confirm_or_abort(question: str, force: bool) -> bool:
    """Ask for confirmation unless --force was given."""
    if force:
        return True
    if Confirm.ask(f"[yellow]{escape(question)}[/yellow]"):
        return True
    console.print("[dim]Cancelled.[/dim]")
    return False


force_option = click.option("--force", "-f", is_flag=True, help="Skip confirmation")
