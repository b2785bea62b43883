# -*- coding: utf-8 -*-
"""
Entity migration - from slug-based to UUID-based identification.

Each entity file in the context directory (people/, projects/, ...) gets
a fresh UUID as `id`, keeps its former id as `slug`, and is renamed to
`{uuid-prefix}-{slug}.yaml`.
"""

import re
import uuid
from collections import OrderedDict
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Union

import yaml

from ..display import out, show_success, show_warning
from ..exceptions import MigrationError

ENTITY_DIRECTORIES = ("people", "projects", "companies", "terms", "ignored")

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)

UUID_PREFIX_LENGTH = 10


class _NoAliasDumper(yaml.SafeDumper):
    """SafeDumper that writes shared values out in full instead of as anchors."""

    def ignore_aliases(self, data):
        return True


@dataclass
class MigrationPlan:
    file: Path
    old_id: str
    new_id: str
    new_filename: str
    entity_type: str


def is_uuid(value) -> bool:
    return isinstance(value, str) and bool(UUID_PATTERN.match(value))


def migrated_filename(new_id: str, slug: str) -> str:
    return f"{new_id[:UUID_PREFIX_LENGTH]}-{slug}.yaml"


def _load_entity(path: Path):
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MigrationError(f"Invalid YAML in {path}: {e}") from e


def migrate_entities(context_path: Union[str, Path], dry_run: bool = True) -> List[MigrationPlan]:
    """
    Plan (and optionally apply) the slug → UUID migration.

    Args:
        context_path: Context directory containing people/, projects/, ...
        dry_run: Only compute the plan, leave files untouched

    Returns:
        One MigrationPlan per entity needing migration
    """
    context_path = Path(context_path).expanduser()
    if not context_path.is_dir():
        raise MigrationError(f"Context directory not found: {context_path}")

    plans = []
    for dir_name in ENTITY_DIRECTORIES:
        dir_path = context_path / dir_name
        if not dir_path.is_dir():
            out(f"Skipping {dir_name} (directory not found)")
            continue

        for file_path in sorted(dir_path.glob("*.yaml")):
            entity = _load_entity(file_path)
            if not isinstance(entity, dict) or not entity.get("id"):
                show_warning(f"Skipping {file_path.name} (no id field)")
                continue

            if is_uuid(entity["id"]):
                out(f"Skipping {file_path.name} (already has UUID)")
                continue

            old_id = str(entity["id"])
            new_id = str(uuid.uuid4())
            new_filename = migrated_filename(new_id, old_id)

            plans.append(MigrationPlan(
                file=file_path,
                old_id=old_id,
                new_id=new_id,
                new_filename=new_filename,
                entity_type=dir_name,
            ))

            if not dry_run:
                entity["id"] = new_id
                entity["slug"] = old_id
                new_path = dir_path / new_filename
                new_path.write_text(
                    yaml.dump(entity, Dumper=_NoAliasDumper, width=float("inf"), sort_keys=False,
                              allow_unicode=True),
                    encoding="utf-8",
                )
                file_path.unlink()
                show_success(f"Migrated: {file_path.name} → {new_filename}")

    return plans


def group_by_type(plans: List[MigrationPlan]) -> Dict[str, List[MigrationPlan]]:
    """Plans grouped by entity type, in first-seen order."""
    grouped = OrderedDict()
    for plan in plans:
        grouped.setdefault(plan.entity_type, []).append(plan)
    return grouped
