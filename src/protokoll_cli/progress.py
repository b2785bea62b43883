# -*- coding: utf-8 -*-
"""
Progress rendering for long-running MCP tools.

The server reports progress through MCP progress notifications; the
ProgressReporter turns them into a ProgressBar. On a TTY the bar is
redrawn in place, elsewhere only milestone lines are printed.
"""

import time
from typing import Optional

from rich.markup import escape

from .display import console, err_console


class ProgressBar:
    """Simple progress bar for the terminal."""

    width = 30

    def __init__(self, message: str = "Processing", total: float = 100, tty: Optional[bool] = None):
        self.message = message
        self.total = total
        self.current = 0
        self.is_tty = console.is_terminal if tty is None else tty
        self.start_time = time.monotonic()

    @property
    def percent(self) -> int:
        if self.total <= 0:
            return 0
        return round(self.current / self.total * 100)

    def update(self, current: float, message: Optional[str] = None):
        """Move the bar to `current` (capped at total)."""
        self.current = min(current, self.total)
        if message:
            self.message = message

        if self.is_tty:
            self._render()
        elif current % 25 == 0 or current == self.total:
            console.print(escape(f"{self.message}: {self.percent}%"))

    def complete(self, final_message: Optional[str] = None):
        self.current = self.total
        if final_message:
            self.message = final_message

        if self.is_tty:
            self._render()
            console.print()
        else:
            console.print(escape(f"{self.message}: 100%"))

    def error(self, message: str):
        if self.is_tty:
            console.print()
        err_console.print(f"[red]✗ {escape(message)}[/red]")

    def _render(self):
        ratio = self.current / self.total if self.total > 0 else 0
        filled = round(self.width * ratio)
        bar = "█" * filled + "░" * (self.width - filled)
        elapsed = round(time.monotonic() - self.start_time)
        # rich strips carriage returns, so the line is redrawn on the raw stream
        console.file.write(f"\r{self.message} [{bar}] {round(ratio * 100)}% ({elapsed}s)")
        console.file.flush()


class ProgressReporter:
    """
    Progress callback for MCPClient.call_tool.

    Notifications without a total cannot be placed on a bar and are ignored.
    """

    def __init__(self, message: str = "Processing", tty: Optional[bool] = None):
        self.message = message
        self.tty = tty
        self.bar: Optional[ProgressBar] = None

    async def __call__(self, progress: float, total: Optional[float], message: Optional[str]):
        if total is None:
            return
        if self.bar is None or self.bar.total != total:
            self.bar = ProgressBar(message or self.message, total, tty=self.tty)
        self.bar.update(progress, message)

    def finish(self):
        """Terminate the bar line if anything was rendered."""
        if self.bar is not None and self.bar.is_tty:
            clear_progress()


def clear_progress():
    """Overwrite the progress line with blanks (TTY only)."""
    if console.is_terminal:
        console.file.write("\r" + " " * 80 + "\r")
        console.file.flush()


def format_duration(seconds: float) -> str:
    """Human readable duration: 45s, 1m 30s, 1h 1m."""
    if seconds < 60:
        return f"{round(seconds)}s"
    if seconds < 3600:
        return f"{int(seconds // 60)}m {round(seconds % 60)}s"
    return f"{int(seconds // 3600)}h {int((seconds % 3600) // 60)}m"
