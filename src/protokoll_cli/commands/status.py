# -*- coding: utf-8 -*-
"""Transcript lifecycle status commands."""

import click

from ..display import out, show_info, show_success
from .common import call_json

VALID_STATUSES = ("initial", "enhanced", "reviewed", "in_progress", "closed", "archived")
DEFAULT_STATUS = "reviewed"


@click.group()
def status():
    """🏷️  Manage transcript lifecycle status."""
    pass


@status.command("set", epilog=f"""\b
Valid statuses: {', '.join(VALID_STATUSES)}

\b
Examples:
  protokoll status set meeting-notes.md reviewed
  protokoll status set 2026/02/03-meeting.md closed
""")
@click.argument("transcript_path")
@click.argument("new_status")
def status_set(transcript_path, new_status):
    """Set the lifecycle status of a transcript."""
    data = call_json("protokoll_set_status", {
        "transcriptPath": transcript_path,
        "status": new_status,
    })
    if data is None:
        return
    if data.get("changed"):
        show_success(f"Status changed: {data.get('previousStatus')} → {data.get('newStatus')}")
    else:
        show_info(f"Status is already '{data.get('newStatus')}'")


@status.command("show")
@click.argument("transcript_path")
def status_show(transcript_path):
    """Show the current status of a transcript."""
    data = call_json("protokoll_read_transcript", {"transcriptPath": transcript_path})
    if data is None:
        return
    metadata = data.get("metadata") or {}
    out(f"File: {data.get('filePath')}")
    out(f"Title: {data.get('title')}")
    out(f"Status: {metadata.get('status') or DEFAULT_STATUS}")
