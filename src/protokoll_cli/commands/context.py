# -*- coding: utf-8 -*-
"""
Context commands - projects, people, terms and companies.

Commands:
  - context status / search
  - project list/show/add/delete
  - person  list/show/add/delete
  - term    list/show/add/merge/delete
  - company list/show/add/delete
"""

import click

from ..display import out, show_json, show_success
from .common import call_json, confirm_or_abort, force_option


# =============================================================================
# Shared helpers
# =============================================================================

def _show_entity(entity_type: str, entity_id: str):
    data = call_json("protokoll_get_entity", {
        "entityType": entity_type,
        "entityId": entity_id,
    })
    if data is None:
        return
    out()
    show_json(data.get("entity"))


def _delete_entity(entity_type: str, entity_id: str, force: bool):
    label = entity_type.capitalize()
    if not confirm_or_abort(f"Delete {entity_type} '{entity_id}'?", force):
        return
    data = call_json("protokoll_delete_entity", {
        "entityType": entity_type,
        "entityId": entity_id,
    })
    if data and data.get("success"):
        show_success(f'{label} "{entity_id}" deleted.')


def _created_id(data: dict, key: str):
    return (data.get(key) or {}).get("id") or data.get("id")


# =============================================================================
# Context overview
# =============================================================================

@click.group()
def context():
    """🧭 Show context system overview."""
    pass


@context.command("status")
def context_status():
    """Show context system status."""
    data = call_json("protokoll_context_status", {})
    if data is None:
        return

    out("\n[Context System Status]\n")
    directories = data.get("directories") or []
    if not directories:
        out("No .protokoll directories found.")
        out('Run "protokoll --init-config" to create one.')
        return

    out("Discovered context directories:")
    for d in directories:
        marker = "→" if d.get("level") == 0 else " "
        out(f"  {marker} {d.get('path')} (level {d.get('level')})")

    counts = data.get("counts") or {}
    out("\nLoaded entities:")
    out(f"  Projects:  {counts.get('projects') or 0}")
    out(f"  People:    {counts.get('people') or 0}")
    out(f"  Terms:     {counts.get('terms') or 0}")
    out(f"  Companies: {counts.get('companies') or 0}")
    out(f"  Ignored:   {counts.get('ignored') or 0}")
    out()


@context.command("search")
@click.argument("query")
def context_search(query):
    """Search across all entity types."""
    data = call_json("protokoll_search_context", {"query": query})
    if data is None:
        return

    results = data.get("results") or []
    if not results:
        out(f'No results found for "{query}".')
        return

    out(f'\nResults for "{query}" ({len(results)}):\n')
    for entity in results:
        out(f"  [{entity.get('type')}] {entity.get('id')} - {entity.get('name')}")
    out()


# =============================================================================
# Projects
# =============================================================================

@click.group()
def project():
    """📁 Manage projects."""
    pass


@project.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show full details")
def project_list(verbose):
    """List all projects."""
    data = call_json("protokoll_list_projects", {})
    if data is None:
        return
    projects = data.get("projects") or []
    if not projects:
        out("No projects found.")
        return

    out(f"\nProjects ({len(projects)}):\n")
    for p in projects:
        destination = (p.get("routing") or {}).get("destination")
        if verbose:
            out(f"  {p.get('id')}")
            out(f"    Name: {p.get('name')}")
            if p.get("description"):
                out(f"    Description: {p['description']}")
            if destination:
                out(f"    Destination: {destination}")
            out(f"    Active: {str(p.get('active') is not False).lower()}")
            out()
        else:
            dest = f" → {destination}" if destination else ""
            inactive = " [inactive]" if p.get("active") is False else ""
            out(f"  {p.get('id')} - {p.get('name')}{dest}{inactive}")


@project.command("show")
@click.argument("entity_id")
def project_show(entity_id):
    """Show details of a project."""
    _show_entity("project", entity_id)


@project.command("add")
@click.option("--name", required=True, help="Project name")
@click.option("--id", "entity_id", default=None, help="Project ID (derived from name if omitted)")
@click.option("--description", default=None, help="Project description")
@click.option("--destination", default=None, help="Output destination path")
@click.option("--structure", type=click.Choice(["none", "year", "month", "day"]), default=None,
              help="Directory structure")
def project_add(name, entity_id, description, destination, structure):
    """Add a new project."""
    data = call_json("protokoll_add_project", {
        "name": name,
        "id": entity_id,
        "description": description,
        "destination": destination,
        "structure": structure,
    })
    if data is not None:
        show_success(f"Project created: {_created_id(data, 'project')}")


@project.command("delete")
@click.argument("entity_id")
@force_option
def project_delete(entity_id, force):
    """Delete a project."""
    _delete_entity("project", entity_id, force)


# =============================================================================
# People
# =============================================================================

@click.group()
def person():
    """👤 Manage people."""
    pass


@person.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show full details")
def person_list(verbose):
    """List all people."""
    data = call_json("protokoll_list_people", {})
    if data is None:
        return
    people = data.get("people") or []
    if not people:
        out("No people found.")
        return

    out(f"\nPeople ({len(people)}):\n")
    for p in people:
        if verbose:
            out(f"  {p.get('id')}")
            out(f"    Name: {p.get('name')}")
            if p.get("role"):
                out(f"    Role: {p['role']}")
            if p.get("company"):
                out(f"    Company: {p['company']}")
            out()
        else:
            details = []
            if p.get("role"):
                details.append(p["role"])
            if p.get("company"):
                details.append(f"@{p['company']}")
            suffix = f" ({' · '.join(details)})" if details else ""
            out(f"  {p.get('id')} - {p.get('name')}{suffix}")


@person.command("show")
@click.argument("entity_id")
def person_show(entity_id):
    """Show details of a person."""
    _show_entity("person", entity_id)


@person.command("add")
@click.option("--name", required=True, help="Person name")
@click.option("--id", "entity_id", default=None, help="Person ID (derived from name if omitted)")
@click.option("--role", default=None, help="Role/title")
@click.option("--company", default=None, help="Company name")
def person_add(name, entity_id, role, company):
    """Add a new person."""
    data = call_json("protokoll_add_person", {
        "name": name,
        "id": entity_id,
        "role": role,
        "company": company,
    })
    if data is not None:
        show_success(f"Person created: {_created_id(data, 'person')}")


@person.command("delete")
@click.argument("entity_id")
@force_option
def person_delete(entity_id, force):
    """Delete a person."""
    _delete_entity("person", entity_id, force)


# =============================================================================
# Terms
# =============================================================================

@click.group()
def term():
    """📖 Manage terms."""
    pass


@term.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show full details")
def term_list(verbose):
    """List all terms."""
    data = call_json("protokoll_list_terms", {})
    if data is None:
        return
    terms = data.get("terms") or []
    if not terms:
        out("No terms found.")
        return

    out(f"\nTerms ({len(terms)}):\n")
    for t in terms:
        if verbose:
            out(f"  {t.get('id')}")
            out(f"    Name: {t.get('name')}")
            if t.get("expansion"):
                out(f"    Expansion: {t['expansion']}")
            if t.get("domain"):
                out(f"    Domain: {t['domain']}")
            out()
        else:
            expansion = f" ({t['expansion']})" if t.get("expansion") else ""
            out(f"  {t.get('id')} - {t.get('name')}{expansion}")


@term.command("show")
@click.argument("entity_id")
def term_show(entity_id):
    """Show details of a term."""
    _show_entity("term", entity_id)


@term.command("add")
@click.option("--name", required=True, help="Term name")
@click.option("--id", "entity_id", default=None, help="Term ID (derived from name if omitted)")
@click.option("--expansion", default=None, help="Full expansion if acronym")
@click.option("--domain", default=None, help="Domain category")
@click.option("--description", default=None, help="Term description")
def term_add(name, entity_id, expansion, domain, description):
    """Add a new term."""
    data = call_json("protokoll_add_term", {
        "name": name,
        "id": entity_id,
        "expansion": expansion,
        "domain": domain,
        "description": description,
    })
    if data is not None:
        show_success(f"Term created: {_created_id(data, 'term')}")


@term.command("merge")
@click.argument("source_id")
@click.argument("target_id")
def term_merge(source_id, target_id):
    """Merge two terms (combines metadata, deletes source)."""
    data = call_json("protokoll_merge_terms", {
        "sourceId": source_id,
        "targetId": target_id,
    })
    if data and data.get("success"):
        show_success(f'Merged "{source_id}" into "{target_id}"')


@term.command("delete")
@click.argument("entity_id")
@force_option
def term_delete(entity_id, force):
    """Delete a term."""
    _delete_entity("term", entity_id, force)


# =============================================================================
# Companies
# =============================================================================

@click.group()
def company():
    """🏢 Manage companies."""
    pass


@company.command("list")
@click.option("--verbose", "-v", is_flag=True, help="Show full details")
def company_list(verbose):
    """List all companies."""
    data = call_json("protokoll_list_companies", {})
    if data is None:
        return
    companies = data.get("companies") or []
    if not companies:
        out("No companies found.")
        return

    out(f"\nCompanies ({len(companies)}):\n")
    for c in companies:
        if verbose:
            out(f"  {c.get('id')}")
            out(f"    Name: {c.get('name')}")
            if c.get("industry"):
                out(f"    Industry: {c['industry']}")
            out()
        else:
            industry = f" [{c['industry']}]" if c.get("industry") else ""
            out(f"  {c.get('id')} - {c.get('name')}{industry}")


@company.command("show")
@click.argument("entity_id")
def company_show(entity_id):
    """Show details of a company."""
    _show_entity("company", entity_id)


@company.command("add")
@click.option("--name", required=True, help="Company name")
@click.option("--id", "entity_id", default=None, help="Company ID (derived from name if omitted)")
@click.option("--industry", default=None, help="Industry sector")
def company_add(name, entity_id, industry):
    """Add a new company."""
    data = call_json("protokoll_add_company", {
        "name": name,
        "id": entity_id,
        "industry": industry,
    })
    if data is not None:
        show_success(f"Company created: {_created_id(data, 'company')}")


@company.command("delete")
@click.argument("entity_id")
@force_option
def company_delete(entity_id, force):
    """Delete a company."""
    _delete_entity("company", entity_id, force)
