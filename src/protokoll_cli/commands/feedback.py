# -*- coding: utf-8 -*-
"""Natural language feedback on a transcript."""

import click

from ..display import console, out, show_info, show_success
from .common import call_json


@click.command("feedback", epilog="""\b
The feedback is processed by the server's LLM. It can fix spelling,
add terms to context, change project assignment, etc.

\b
Examples:
  protokoll feedback meeting.md "YB should be Wibey"
  protokoll feedback notes.md "San Jay Grouper is actually Sanjay Gupta"
  protokoll feedback notes.md "This should be assigned to the quarterly-review project"
""")
@click.argument("transcript_path")
@click.argument("feedback_text")
@click.option("--model", "-m", default=None, help="LLM model for processing feedback")
def feedback(transcript_path, feedback_text, model):
    """💬 Provide natural language feedback to correct a transcript."""
    out("Processing feedback...")
    data = call_json("protokoll_provide_feedback", {
        "transcriptPath": transcript_path,
        "feedback": feedback_text,
        "model": model,
    })
    if data is None:
        return

    if (data.get("changesApplied") or 0) > 0:
        console.print()
        show_success(f"Applied {data['changesApplied']} change(s):")
        for change in data.get("changes") or []:
            out(f"  • {change.get('type')}: {change.get('description')}")
        if data.get("moved"):
            out(f"\n  File moved to: {data.get('outputPath')}")
    else:
        console.print()
        show_info("No changes were applied.")
