"""CLI for inspecting role definitions and resolutions.

Usage (uv):
  uv run python -m scripts.resolve_roles compute --roles roles.json 1 4 7
  uv run python -m scripts.resolve_roles list-roles --roles roles.json

Or via installed script:
  rolestyle compute 1 4 7
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import List, Optional

import typer

from rolestyle.config import get_resolution_log_path, get_roles_path, get_settings
from rolestyle.db import create_schema, session_scope
from rolestyle.logging_utils import JsonlResolutionLogger, configure_logging, log_resolution
from rolestyle.resolution import RoleManager
from rolestyle.role_store import RoleStore, dump_definitions_json, load_definitions_json
from rolestyle.types import RoleDefinition

app = typer.Typer(add_completion=False, help="Resolve participant roles into display attributes")


def _load(roles: Optional[Path]) -> List[RoleDefinition]:
    path = roles if roles is not None else get_roles_path()
    if not path.exists():
        typer.echo(f"No role definitions found at {path}", err=True)
        raise typer.Exit(code=1)
    try:
        return load_definitions_json(path)
    except (ValueError, OSError) as e:
        typer.echo(f"Could not read role definitions from {path}: {e}", err=True)
        raise typer.Exit(code=1)


@app.callback()
def _root() -> None:
    configure_logging(get_settings().log_level)


@app.command()
def compute(
    role_ids: List[int] = typer.Argument(None, help="Assigned role ids, in order"),
    roles: Optional[Path] = typer.Option(None, "--roles", "-r", help="Path to role definitions JSON"),
    participant: Optional[int] = typer.Option(None, "--participant", "-p", help="Participant id for the log entry"),
    log_path: Optional[Path] = typer.Option(None, "--log-path", help="Append the resolution to this JSONL file (default: RESOLUTION_LOG_PATH)"),
) -> None:
    """Print the computed role for a list of assigned role ids."""
    manager = RoleManager()
    manager.set_all_roles(_load(roles), copy=False)
    assigned = list(role_ids or [])
    computed = manager.compute(assigned)
    if log_path is None:
        log_path = get_resolution_log_path()
    if log_path is not None:
        log_resolution(JsonlResolutionLogger(log_path), assigned, computed, participant_id=participant)
    typer.echo(json.dumps(computed.to_dict()))


@app.command(name="list-roles")
def list_roles(
    roles: Optional[Path] = typer.Option(None, "--roles", "-r", help="Path to role definitions JSON"),
) -> None:
    defs = _load(roles)
    if not defs:
        typer.echo("No roles defined.")
        return
    for d in defs:
        label = d.string_id or "-"
        badge = d.badge_icon or "-"
        typer.echo(f"{d.int_id:>3}  {label:<16} priority={d.priority:<6} badge={badge}")


@app.command(name="import-roles")
def import_roles(
    roles: Optional[Path] = typer.Option(None, "--roles", "-r", help="Path to role definitions JSON"),
) -> None:
    """Replace the database role table with a JSON definition file."""
    defs = _load(roles)
    with session_scope() as session:
        create_schema(session)
        RoleStore().save_definitions(session, defs)
    typer.echo(f"Imported {len(defs)} roles.")


@app.command(name="export-roles")
def export_roles(
    roles: Path = typer.Option(..., "--roles", "-r", help="Where to write role definitions JSON"),
) -> None:
    """Write the database role table to a JSON definition file."""
    with session_scope() as session:
        create_schema(session)
        defs = RoleStore().load_definitions(session)
    dump_definitions_json(roles, defs)
    typer.echo(f"Exported {len(defs)} roles to {roles}.")


if __name__ == "__main__":  # pragma: no cover
    app()
