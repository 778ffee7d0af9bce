"""Role resolution: merge a participant's assigned roles into one ComputedRole.

Merge rule, applied per attribute (badge icon, name color, chat color):
- a role with strictly higher priority than the best seen so far overrides
  whatever is already in the slot;
- any other role may only fill a slot that is still empty.

So among equal-priority roles the first one in assignment order that supplies
a value wins. Permissions are never merged client-side.
"""
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence

from .colors import ColorParseError, parse_hex_rgb, parse_rich_color
from .registry import RoleRegistry
from .types import MIN_PRIORITY, RGB, ComputedRole, RichColor, RoleDefinition

logger = logging.getLogger(__name__)


def compute_role(registry: RoleRegistry, assigned_ids: Iterable[int]) -> ComputedRole:
    """Resolve `assigned_ids` against `registry`.

    Unknown ids are skipped. A malformed name color logs a warning and is
    dropped; a malformed chat color is dropped silently. Never raises for
    bad role data.
    """
    priority = MIN_PRIORITY
    badge_icon = ""
    name_color: Optional[RichColor] = None
    chat_color: Optional[RGB] = None

    for role_id in assigned_ids:
        role = registry.find(role_id)
        if role is None:
            continue

        is_higher = role.priority > priority

        if role.badge_icon and (is_higher or not badge_icon):
            badge_icon = role.badge_icon

        if role.name_color and (is_higher or name_color is None):
            try:
                name_color = parse_rich_color(role.name_color)
            except ColorParseError as e:
                logger.warning("failed to parse color: %s", e)

        if role.chat_color and (is_higher or chat_color is None):
            try:
                chat_color = parse_hex_rgb(role.chat_color)
            except ColorParseError:
                pass

        if is_higher:
            priority = role.priority

    return ComputedRole(
        priority=priority,
        badge_icon=badge_icon,
        name_color=name_color,
        chat_color=chat_color,
    )


class RoleManager:
    """Session-scoped owner of the role registry.

    Not thread-safe: replacing roles while another thread computes must be
    serialized by the caller.
    """

    def __init__(self, registry: Optional[RoleRegistry] = None) -> None:
        self.registry = registry if registry is not None else RoleRegistry()

    def set_all_roles(self, definitions: Sequence[RoleDefinition], copy: bool = True) -> None:
        self.registry.replace(definitions, copy=copy)

    def clear_all_roles(self) -> None:
        self.registry.clear()

    def get_all_roles(self) -> List[RoleDefinition]:
        return self.registry.all()

    def compute(self, assigned_ids: Iterable[int]) -> ComputedRole:
        return compute_role(self.registry, assigned_ids)
