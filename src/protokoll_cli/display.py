# -*- coding: utf-8 -*-
"""
Rich display helpers for the Protokoll CLI.

Normal output goes to stdout through `console`, errors and diagnostics
go to stderr through `err_console`.
"""

import json
from typing import Any

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)

_verbose = False


def set_verbose(enabled: bool):
    """Enable or disable diagnostic output on stderr."""
    global _verbose
    _verbose = bool(enabled)


def is_verbose() -> bool:
    return _verbose


def log(component: str, message: str, icon: str = "🔍"):
    """Diagnostic line tagged with the emitting component (verbose only)."""
    if _verbose:
        err_console.print(f"[dim]{icon} \\[{component}] {escape(message)}[/dim]")


def out(text: Any = ""):
    """Print plain text, without rich markup interpretation."""
    console.print(escape(str(text)))


def show_success(message: str):
    console.print(f"[green]✓[/green] {escape(message)}")


def show_info(message: str):
    console.print(f"[cyan]ℹ[/cyan] {escape(message)}")


def show_warning(message: str):
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def show_error(message: str, hint: str = None):
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    if hint:
        err_console.print(f"[dim]{escape(hint)}[/dim]")


def show_json(data: Any):
    """Pretty-print a JSON-compatible value with a two-space indent."""
    console.print(escape(json.dumps(data, indent=2, ensure_ascii=False)))
