# -*- coding: utf-8 -*-
"""
Click commands for the Protokoll CLI.

Available commands:
  - version       : CLI and MCP server versions
  - status        : Transcript lifecycle status (set/show)
  - task          : Transcript tasks (add/complete/delete)
  - transcript    : Read and list transcripts
  - context       : Context status and search
  - project/person/term/company : Entity management
  - action        : combine, edit, change-date, create-note
  - feedback      : Natural language corrections
  - process/batch : Audio processing
  - tools/resources/prompts : Raw MCP access
  - migrate       : Local entity migration
"""

import click

from .. import __version__
from ..client import first_text
from ..display import out, set_verbose
from ..factory import open_client, set_config_path
from .action import action
from .audio import batch, process
from .common import run
from .context import company, context, person, project, term
from .feedback import feedback
from .migrate import migrate
from .status import status
from .task import task
from .tools import prompts, resources, tools
from .transcript import transcript


# =============================================================================
# Main group
# =============================================================================

@click.group(invoke_without_command=True)
@click.option("--config", "-c", "config_path", envvar="PROTOKOLL_CONFIG", default=None,
              help="Path to configuration file (default: protokoll-config.yaml)")
@click.option("--verbose", "-v", is_flag=True, help="Show MCP diagnostics on stderr")
@click.version_option(__version__, prog_name="protokoll")
@click.pass_context
def cli(ctx, config_path, verbose):
    """🎙️ Protokoll CLI - MCP client for transcription and context management.

    \b
    Examples:
      protokoll transcript list          # List transcripts
      protokoll project list             # List projects
      protokoll process recording.m4a    # Transcribe an audio file
      protokoll --config ./my.yaml version
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose
    set_config_path(config_path)
    set_verbose(verbose)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# =============================================================================
# Version
# =============================================================================

@cli.command()
def version():
    """ℹ️  Show version information from the MCP server."""
    async def _run():
        async with open_client() as client:
            return await client.call_tool("protokoll_get_version")

    result = run(_run())
    out(f"Protokoll CLI: {__version__}")
    out("\nMCP Server:")
    if not result.content:
        out("No version information returned from server")
        return
    # a non-text block has nothing printable
    text = first_text(result)
    if text is not None:
        out(text)


for command in (status, task, transcript, context, project, person, term, company,
                action, feedback, process, batch, tools, resources, prompts, migrate):
    cli.add_command(command)
