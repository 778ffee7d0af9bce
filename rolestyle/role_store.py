"""Sources of role definitions.

- JSON files (what the CLI and tests feed the registry from).
- The `roles` table, for a server keeping the authoritative set.

Both produce plain RoleDefinition lists; installing them into a registry is
the caller's job.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from .models import RoleRow
from .types import RoleDefinition

logger = logging.getLogger(__name__)


def definitions_from_data(data: Any) -> List[RoleDefinition]:
    """Build definitions from a decoded JSON document.

    Accepts a list of role dicts or {"roles": [...]}. Entries that are not
    dicts or lack a usable int_id are skipped.
    """
    if isinstance(data, dict):
        data = data.get("roles") or []
    if not isinstance(data, list):
        return []

    defs: List[RoleDefinition] = []
    for idx, item in enumerate(data):
        if not isinstance(item, dict):
            logger.debug("skipping role entry %d: not an object", idx)
            continue
        try:
            defs.append(RoleDefinition.from_dict(item))
        except (KeyError, TypeError, ValueError) as e:
            logger.debug("skipping role entry %d: %s", idx, e)
    return defs


def load_definitions_json(path: Path) -> List[RoleDefinition]:
    p = Path(path)
    with p.open("r", encoding="utf-8") as f:
        return definitions_from_data(json.load(f))


def dump_definitions_json(path: Path, definitions: Iterable[RoleDefinition]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    payload = {"roles": [d.to_dict() for d in definitions]}
    with p.open("w", encoding="utf-8") as f:
        json.dump(payload, f, indent=2)
        f.write("\n")


class RoleStore:
    """Simple helper to manage RoleRow rows."""

    def save_definitions(self, session: Session, definitions: Iterable[RoleDefinition]) -> List[RoleRow]:
        """Replace the whole table with `definitions`, preserving order."""
        session.execute(delete(RoleRow))
        rows = [
            RoleRow(
                position=pos,
                int_id=d.int_id,
                string_id=d.string_id,
                priority=d.priority,
                badge_icon=d.badge_icon,
                name_color=d.name_color,
                chat_color=d.chat_color,
                permissions=dict(d.permissions) or None,
            )
            for pos, d in enumerate(definitions)
        ]
        session.add_all(rows)
        return rows

    def load_definitions(self, session: Session) -> List[RoleDefinition]:
        stmt = select(RoleRow).order_by(RoleRow.position, RoleRow.id)
        return [
            RoleDefinition(
                int_id=row.int_id,
                priority=row.priority,
                string_id=row.string_id or "",
                badge_icon=row.badge_icon or "",
                name_color=row.name_color or "",
                chat_color=row.chat_color or "",
                permissions=dict(row.permissions or {}),
            )
            for row in session.scalars(stmt).all()
        ]
