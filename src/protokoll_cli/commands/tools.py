# -*- coding: utf-8 -*-
"""
Low-level MCP commands: tools, resources and prompts exposed by the server.

Useful for debugging the server or calling a tool the CLI has no
dedicated command for.
"""

import json

import click
from rich.table import Table

from ..display import console, out, show_json
from ..factory import open_client
from .common import fail, run


# =============================================================================
# Tools
# =============================================================================

def _first_line(text) -> str:
    lines = (text or "").strip().splitlines()
    return lines[0] if lines else ""


@click.group()
def tools():
    """🔧 Inspect and call MCP tools directly."""
    pass


@tools.command("list")
def tools_list():
    """List the tools exposed by the MCP server."""
    async def _run():
        async with open_client() as client:
            return await client.list_tools()

    result = run(_run())
    items = result.tools or []
    table = Table(title=f"🔧 Tools ({len(items)})")
    table.add_column("Name", style="cyan")
    table.add_column("Description", style="white")
    for t in items:
        table.add_row(t.name, _first_line(t.description))
    console.print(table)


@tools.command("call")
@click.argument("name")
@click.option("--args-json", default="{}", help="Tool arguments as a JSON object")
def tools_call(name, args_json):
    """Call any MCP tool and print its raw response."""
    try:
        args = json.loads(args_json)
    except json.JSONDecodeError as e:
        fail(f"--args-json is not valid JSON: {e}")
    if not isinstance(args, dict):
        fail("--args-json must be a JSON object")

    async def _run():
        async with open_client() as client:
            return await client.call_tool_text(name, args)

    text = run(_run())
    if text is None:
        out("No text content returned.")
        return
    try:
        show_json(json.loads(text))
    except json.JSONDecodeError:
        out(text)


# =============================================================================
# Resources
# =============================================================================

@click.group()
def resources():
    """📚 Browse MCP resources."""
    pass


@resources.command("list")
def resources_list():
    """List the resources exposed by the MCP server."""
    async def _run():
        async with open_client() as client:
            return await client.list_resources()

    result = run(_run())
    items = result.resources or []
    if not items:
        out("No resources found.")
        return
    out(f"\nResources ({len(items)}):\n")
    for r in items:
        suffix = f" - {r.name}" if r.name else ""
        out(f"  {r.uri}{suffix}")


@resources.command("read")
@click.argument("uri")
def resources_read(uri):
    """Read a resource and print its text contents."""
    async def _run():
        async with open_client() as client:
            return await client.read_resource(uri)

    result = run(_run())
    for item in result.contents or []:
        text = getattr(item, "text", None)
        if text is not None:
            out(text)
        else:
            out(f"[binary content: {getattr(item, 'mimeType', None) or 'unknown type'}]")


# =============================================================================
# Prompts
# =============================================================================

@click.group()
def prompts():
    """💡 Browse MCP prompts."""
    pass


@prompts.command("list")
def prompts_list():
    """List the prompts exposed by the MCP server."""
    async def _run():
        async with open_client() as client:
            return await client.list_prompts()

    result = run(_run())
    items = result.prompts or []
    if not items:
        out("No prompts found.")
        return
    out(f"\nPrompts ({len(items)}):\n")
    for p in items:
        suffix = f" - {p.description}" if p.description else ""
        out(f"  {p.name}{suffix}")


def _parse_pairs(pairs):
    arguments = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            fail(f"Invalid --arg '{pair}', expected key=value")
        arguments[key] = value
    return arguments


@prompts.command("get")
@click.argument("name")
@click.option("--arg", "pairs", multiple=True, help="Prompt argument as key=value (repeatable)")
def prompts_get(name, pairs):
    """Render a prompt and print its messages."""
    arguments = _parse_pairs(pairs)

    async def _run():
        async with open_client() as client:
            return await client.get_prompt(name, arguments or None)

    result = run(_run())
    if result.description:
        out(f"{result.description}\n")
    for message in result.messages or []:
        text = getattr(message.content, "text", None)
        out(f"[{message.role}] {text if text is not None else message.content.type}")
