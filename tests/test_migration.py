"""Tests for the slug → UUID entity migration."""

import uuid

import pytest
import yaml

from protokoll_cli.core.migration import (
    ENTITY_DIRECTORIES, group_by_type, is_uuid, migrate_entities, migrated_filename,
)
from protokoll_cli.exceptions import MigrationError

EXISTING_UUID = "0f8fad5b-d9cb-469f-a165-70867728950e"


@pytest.fixture
def context_dir(tmp_path):
    people = tmp_path / "people"
    terms = tmp_path / "terms"
    people.mkdir()
    terms.mkdir()
    (people / "john-doe.yaml").write_text("id: john-doe\nname: John Doe\nrole: Engineer\n")
    (people / "jane.yaml").write_text(f"id: {EXISTING_UUID}\nname: Jane\n")
    (terms / "kubernetes.yaml").write_text("id: kubernetes\nname: Kubernetes\nsounds_like:\n  - cube\n")
    (terms / "notes.txt").write_text("not an entity")
    return tmp_path


class TestHelpers:

    def test_is_uuid(self):
        assert is_uuid(EXISTING_UUID)
        assert is_uuid(EXISTING_UUID.upper())
        assert not is_uuid("john-doe")
        assert not is_uuid(None)

    def test_migrated_filename_uses_ten_char_prefix(self):
        assert migrated_filename(EXISTING_UUID, "john-doe") == "0f8fad5b-d-john-doe.yaml"

    def test_directory_order(self):
        assert ENTITY_DIRECTORIES == ("people", "projects", "companies", "terms", "ignored")


class TestDryRun:

    def test_plans_without_touching_files(self, context_dir):
        before = sorted(p.name for p in context_dir.rglob("*"))
        plans = migrate_entities(context_dir, dry_run=True)

        assert [(p.entity_type, p.old_id) for p in plans] == [
            ("people", "john-doe"),
            ("terms", "kubernetes"),
        ]
        assert sorted(p.name for p in context_dir.rglob("*")) == before

    def test_plan_fields(self, context_dir):
        plan = migrate_entities(context_dir)[0]
        assert plan.file == context_dir / "people" / "john-doe.yaml"
        assert is_uuid(plan.new_id)
        assert plan.new_filename == f"{plan.new_id[:10]}-john-doe.yaml"

    def test_missing_directories_are_reported(self, context_dir, capsys):
        migrate_entities(context_dir)
        output = capsys.readouterr().out
        assert "Skipping projects (directory not found)" in output
        assert "Skipping jane.yaml (already has UUID)" in output

    def test_missing_context_dir(self, tmp_path):
        with pytest.raises(MigrationError, match="Context directory not found"):
            migrate_entities(tmp_path / "nope")


class TestExecute:

    def test_renames_and_rewrites_ids(self, context_dir):
        plans = migrate_entities(context_dir, dry_run=False)
        person = plans[0]

        assert not (context_dir / "people" / "john-doe.yaml").exists()
        migrated = yaml.safe_load((context_dir / "people" / person.new_filename).read_text())
        assert migrated["id"] == person.new_id
        assert migrated["slug"] == "john-doe"
        assert migrated["name"] == "John Doe"
        assert migrated["role"] == "Engineer"
        uuid.UUID(migrated["id"])

    def test_preserves_nested_values(self, context_dir):
        plans = migrate_entities(context_dir, dry_run=False)
        term = next(p for p in plans if p.entity_type == "terms")
        migrated = yaml.safe_load((context_dir / "terms" / term.new_filename).read_text())
        assert migrated["sounds_like"] == ["cube"]

    def test_second_run_has_nothing_to_do(self, context_dir):
        migrate_entities(context_dir, dry_run=False)
        assert migrate_entities(context_dir, dry_run=False) == []

    def test_entity_without_id_is_skipped(self, tmp_path, capsys):
        (tmp_path / "companies").mkdir()
        (tmp_path / "companies" / "acme.yaml").write_text("name: Acme\n")
        assert migrate_entities(tmp_path, dry_run=False) == []
        assert "Skipping acme.yaml (no id field)" in capsys.readouterr().out
        assert (tmp_path / "companies" / "acme.yaml").exists()

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "people").mkdir()
        (tmp_path / "people" / "broken.yaml").write_text("id: [unclosed\n")
        with pytest.raises(MigrationError, match="Invalid YAML"):
            migrate_entities(tmp_path)


def test_group_by_type_keeps_first_seen_order(context_dir):
    grouped = group_by_type(migrate_entities(context_dir))
    assert list(grouped) == ["people", "terms"]
    assert len(grouped["people"]) == 1


def test_shared_values_are_written_without_anchors(tmp_path):
    (tmp_path / "terms").mkdir()
    (tmp_path / "terms" / "ali.yaml").write_text(
        "id: ali\nsounds_like: &s [al, ali]\nalias: *s\n"
    )
    plan = migrate_entities(tmp_path, dry_run=False)[0]
    written = (tmp_path / "terms" / plan.new_filename).read_text()

    assert "&" not in written
    assert "*" not in written
    migrated = yaml.safe_load(written)
    assert migrated["sounds_like"] == ["al", "ali"]
    assert migrated["alias"] == ["al", "ali"]
