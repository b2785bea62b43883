# -*- coding: utf-8 -*-
"""Migration utilities (run locally, no MCP server involved)."""

import os

import click

from ..core.migration import group_by_type, migrate_entities
from ..display import console, out, show_success
from ..exceptions import ProtokollError
from .common import fail


@click.group()
def migrate():
    """🚚 Migration utilities."""
    pass


@migrate.command("entities", epilog="""\b
Migration process:
  1. Generates UUIDs for all entity files
  2. Renames files to {uuid-prefix}-{slug}.yaml format
  3. Updates id field to UUID and adds slug field with old id

\b
Examples:
  protokoll migrate entities --context ~/activity/context --dry-run
  protokoll migrate entities --context ~/activity/context --execute
""")
@click.option("--context", "-c", "context_path", default=os.getcwd, show_default="current directory",
              type=click.Path(file_okay=False), help="Context directory path")
@click.option("--dry-run/--execute", "dry_run", default=True,
              help="Show what would change (default) or actually perform the migration")
def migrate_entities_cmd(context_path, dry_run):
    """Migrate entity files from slug to UUID identification."""
    console.print(f"\n[bold]{'🔍 DRY RUN MODE' if dry_run else '⚡ EXECUTING MIGRATION'}[/bold]")
    out(f"Context directory: {context_path}\n")

    try:
        plans = migrate_entities(context_path, dry_run=dry_run)
    except ProtokollError as e:
        fail(str(e), e.hint)
    except OSError as e:
        fail(str(e))

    if not plans:
        show_success("No entities need migration (all already have UUIDs)")
        return

    out(f"\nMigration Plan ({len(plans)} entities):\n")
    for entity_type, type_plans in group_by_type(plans).items():
        out(f"\n{entity_type} ({len(type_plans)}):")
        for plan in type_plans:
            out(f"  {plan.file.name}")
            out(f"    Old ID: {plan.old_id}")
            out(f"    New ID: {plan.new_id}")
            out(f"    New Filename: {plan.new_filename}")

    if dry_run:
        console.print("\n[yellow]⚠️  This was a dry run. No changes were made.[/yellow]")
        out("To execute the migration, run with --execute flag")
    else:
        out()
        show_success(f"Migration complete! {len(plans)} entities migrated.")
