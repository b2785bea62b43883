#!/usr/bin/env python3
"""
Batch migration of context entities from slug ids to UUIDs.

Same operation as `protokoll migrate entities`, for use on several
context directories at once from a shell loop or cron job.

Usage: python scripts/migrate_entities.py CONTEXT_DIR [CONTEXT_DIR ...] [--dry-run|--apply]
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))
from protokoll_cli.core.migration import group_by_type, migrate_entities
from protokoll_cli.exceptions import ProtokollError


def main(argv):
    apply = "--apply" in argv
    directories = [a for a in argv if not a.startswith("--")]
    if not directories:
        print(__doc__.strip().splitlines()[-1], file=sys.stderr)
        return 1

    total = 0
    failed = 0
    for context_dir in directories:
        print(f"\n{'='*70}")
        print(f"  ENTITY MIGRATION - {'⚡ APPLY' if apply else 'DRY RUN'}")
        print(f"  Context: {context_dir}")
        print(f"{'='*70}\n")

        try:
            plans = migrate_entities(context_dir, dry_run=not apply)
        except ProtokollError as e:
            print(f"❌ {e}", file=sys.stderr)
            failed += 1
            continue

        for entity_type, type_plans in group_by_type(plans).items():
            print(f"  {entity_type:<12} {len(type_plans):>4}")
        total += len(plans)

    print(f"\n{'='*70}")
    print(f"  {'Migrated' if apply else 'To migrate'}: {total} entities")
    if failed:
        print(f"  ❌ Failed directories: {failed}")
    print(f"{'='*70}")

    if not apply and total:
        print(f"\n💡 To apply: python scripts/migrate_entities.py {' '.join(directories)} --apply")
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
