# -*- coding: utf-8 -*-
"""Commands for reading and listing transcripts."""

import click

from ..display import out
from .common import call_json


@click.group()
def transcript():
    """📄 Read and manage transcripts."""
    pass


@transcript.command("read")
@click.argument("transcript_path")
def transcript_read(transcript_path):
    """Read a transcript file."""
    data = call_json("protokoll_read_transcript", {"transcriptPath": transcript_path})
    if data is None:
        return
    out(f"📄 {data.get('title')}")
    out(f"   File: {data.get('filePath')}")
    out(f"   Length: {data.get('contentLength')} characters")
    out(f"\n{data.get('content', '')}")


def _date_label(item: dict) -> str:
    if not item.get("date"):
        return "unknown date"
    if item.get("time"):
        return f"{item['date']} {item['time']}"
    return item["date"]


@transcript.command("list", epilog="""\b
Examples:
  protokoll transcript list
  protokoll transcript list --limit 20
  protokoll transcript list --search meeting
  protokoll transcript list --sort title
""")
@click.option("--limit", "-l", default=50, show_default=True, help="Maximum number of results")
@click.option("--search", "-s", default=None, help="Search within transcripts")
@click.option("--sort", "sort_by", type=click.Choice(["date", "filename", "title"]),
              default="date", show_default=True, help="Sort field")
def transcript_list(limit, search, sort_by):
    """List transcripts."""
    data = call_json("protokoll_list_transcripts", {
        "limit": limit,
        "search": search,
        "sortBy": sort_by,
    })
    if data is None:
        return

    pagination = data.get("pagination") or {}
    transcripts = data.get("transcripts") or []
    total = pagination.get("total", len(transcripts))

    out(f"\n📚 Transcripts ({total} total):")
    out(f"   Directory: {data.get('directory')}\n")
    for t in transcripts:
        out(f"   • {t.get('title')}")
        out(f"     Path: {t.get('path')}")
        out(f"     Date: {_date_label(t)}\n")

    if pagination.get("hasMore"):
        out(f"   ... and {total - len(transcripts)} more")
