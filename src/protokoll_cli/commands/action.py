# -*- coding: utf-8 -*-
"""
Transcript actions: combine, edit, change-date, create-note.
"""

import click

from ..display import out, show_info, show_success
from .common import call_json, non_empty

TRANSCRIPT_STATUSES = ("initial", "enhanced", "reviewed", "in_progress", "closed", "archived")


@click.group()
def action():
    """🛠️  Perform actions on transcripts."""
    pass


@action.command("combine", epilog="""\b
Examples:
  protokoll action combine meeting-1.md meeting-2.md
  protokoll action combine notes/*.md --title "Weekly Summary"
  protokoll action combine 2026/02/*.md --project weekly-review
""")
@click.argument("files", nargs=-1, required=True)
@click.option("--title", "-t", default=None, help="Title for combined transcript")
@click.option("--project", "-p", "project_id", default=None, help="Project ID to assign")
def action_combine(files, title, project_id):
    """Combine multiple transcripts into one."""
    data = call_json("protokoll_combine_transcripts", {
        "transcriptPaths": list(files),
        "title": title,
        "projectId": project_id,
    })
    if data is None:
        return
    show_success(f"Combined {len(data.get('sourceFiles') or []) or len(files)} transcripts")
    out(f"  Output: {data.get('outputPath')}")
    deleted = data.get("deletedFiles") or []
    if deleted:
        out(f"  Deleted: {len(deleted)} source files")


@action.command("edit", epilog="""\b
Examples:
  protokoll action edit meeting.md --title "Q1 Planning Meeting"
  protokoll action edit notes.md --project quarterly-review
  protokoll action edit notes.md --add-tag important --add-tag review
  protokoll action edit notes.md --status reviewed
""")
@click.argument("transcript_path")
@click.option("--title", "-t", default=None, help="New title (renames file)")
@click.option("--project", "-p", "project_id", default=None, help="New project ID")
@click.option("--add-tag", "add_tags", multiple=True, help="Add a tag (repeatable)")
@click.option("--remove-tag", "remove_tags", multiple=True, help="Remove a tag (repeatable)")
@click.option("--status", "-s", "new_status", type=click.Choice(TRANSCRIPT_STATUSES), default=None,
              help="New status")
def action_edit(transcript_path, title, project_id, add_tags, remove_tags, new_status):
    """Edit transcript metadata."""
    data = call_json("protokoll_edit_transcript", {
        "transcriptPath": transcript_path,
        "title": title,
        "projectId": project_id,
        "tagsToAdd": non_empty(add_tags),
        "tagsToRemove": non_empty(remove_tags),
        "status": new_status,
    })
    if data is None:
        return
    show_success(str(data.get("message")))
    if data.get("renamed"):
        out(f"  New path: {data.get('outputPath')}")


@action.command("change-date", epilog="""\b
Examples:
  protokoll action change-date meeting.md 2026-02-01
  protokoll action change-date notes.md 2026-01-15T10:30:00Z
""")
@click.argument("transcript_path")
@click.argument("new_date")
def action_change_date(transcript_path, new_date):
    """Change the date of a transcript (moves file)."""
    data = call_json("protokoll_change_transcript_date", {
        "transcriptPath": transcript_path,
        "newDate": new_date,
    })
    if data is None:
        return
    if data.get("moved"):
        show_success("Transcript moved")
        out(f"  From: {data.get('originalPath')}")
        out(f"  To: {data.get('outputPath')}")
    else:
        show_info(str(data.get("message")))


@action.command("create-note", epilog="""\b
Examples:
  protokoll action create-note --title "Meeting Notes"
  protokoll action create-note --title "Planning" --project quarterly-review
  protokoll action create-note --title "Ideas" --tag brainstorm --tag important
""")
@click.option("--title", "-t", required=True, help="Note title")
@click.option("--content", "-c", default=None, help="Note content")
@click.option("--project", "-p", "project_id", default=None, help="Project ID to assign")
@click.option("--tag", "tags", multiple=True, help="Add a tag (repeatable)")
@click.option("--date", "-d", "note_date", default=None, help="Date for the note (ISO format, defaults to now)")
def action_create_note(title, content, project_id, tags, note_date):
    """Create a new note/transcript."""
    data = call_json("protokoll_create_note", {
        "title": title,
        "content": content,
        "projectId": project_id,
        "tags": non_empty(tags),
        "date": note_date,
    })
    if data is None:
        return
    show_success(str(data.get("message")))
    out(f"  Path: {data.get('filePath')}")
