# -*- coding: utf-8 -*-
"""Commands for the tasks attached to a transcript."""

import click

from ..display import out, show_success
from .common import call_json


@click.group()
def task():
    """✅ Manage transcript tasks."""
    pass


@task.command("add", epilog="""\b
Examples:
  protokoll task add meeting.md "Follow up with client"
  protokoll task add notes/planning.md "Review budget proposal"
""")
@click.argument("transcript_path")
@click.argument("description")
def task_add(transcript_path, description):
    """Add a new task to a transcript."""
    data = call_json("protokoll_create_task", {
        "transcriptPath": transcript_path,
        "description": description,
    })
    if data is None:
        return
    created = data.get("task") or {}
    show_success(f"Task created: {created.get('id')}")
    out(f"  Description: {created.get('description')}")


@task.command("complete")
@click.argument("transcript_path")
@click.argument("task_id")
def task_complete(transcript_path, task_id):
    """Mark a task as done."""
    data = call_json("protokoll_complete_task", {
        "transcriptPath": transcript_path,
        "taskId": task_id,
    })
    if data is None:
        return
    show_success(f"Task completed: {data.get('taskId')}")
    out(f"  {data.get('description')}")


@task.command("delete")
@click.argument("transcript_path")
@click.argument("task_id")
def task_delete(transcript_path, task_id):
    """Remove a task from a transcript."""
    data = call_json("protokoll_delete_task", {
        "transcriptPath": transcript_path,
        "taskId": task_id,
    })
    if data is None:
        return
    show_success(f"Task deleted: {data.get('taskId')}")
