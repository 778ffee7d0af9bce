from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


# Minimum 32-bit signed value; a ComputedRole at this priority matched nothing.
MIN_PRIORITY = -(2**31)


# --- Colors ------------------------------------------------------------------


@dataclass(frozen=True)
class RGB:
    """A plain 8-bit RGB triple."""

    r: int
    g: int
    b: int

    def to_hex(self) -> str:
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"


@dataclass(frozen=True)
class RichColor:
    """
    Parsed name color.

    A rich color is either a single solid stop, a gradient drawn across
    the stops, or a cycle that animates through them.
    """

    kind: str  # "solid" | "gradient" | "cycle"
    stops: Tuple[RGB, ...]

    @property
    def is_solid(self) -> bool:
        return self.kind == "solid"

    @property
    def primary(self) -> RGB:
        return self.stops[0]

    def to_spec(self) -> str:
        sep = {"gradient": ">", "cycle": "|"}.get(self.kind, "")
        return sep.join(s.to_hex() for s in self.stops)


# --- RoleDefinition ----------------------------------------------------------


@dataclass
class RoleDefinition:
    """
    One role as delivered by the server.

    Visual attributes are raw strings; an empty string means the role does
    not contribute that attribute. Colors are parsed only at resolution time.
    `permissions` is carried along for collaborators but never read here.
    """

    int_id: int
    priority: int
    string_id: str = ""
    badge_icon: str = ""
    name_color: str = ""  # rich spec, e.g. "#ff0000>#0000ff"
    chat_color: str = ""  # plain hex, e.g. "#ffcc00"
    permissions: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "int_id": int(self.int_id),
            "priority": int(self.priority),
            "string_id": self.string_id,
            "badge_icon": self.badge_icon,
            "name_color": self.name_color,
            "chat_color": self.chat_color,
            "permissions": dict(self.permissions),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RoleDefinition":
        return cls(
            int_id=int(data["int_id"]),
            priority=int(data.get("priority", 0)),
            string_id=str(data.get("string_id") or ""),
            badge_icon=str(data.get("badge_icon") or ""),
            name_color=str(data.get("name_color") or ""),
            chat_color=str(data.get("chat_color") or ""),
            permissions=dict(data.get("permissions") or {}),
        )


# --- ComputedRole ------------------------------------------------------------


@dataclass(frozen=True)
class ComputedRole:
    """Merged display attributes for one participant."""

    priority: int = MIN_PRIORITY
    badge_icon: str = ""
    name_color: Optional[RichColor] = None
    chat_color: Optional[RGB] = None

    @property
    def matched(self) -> bool:
        return self.priority > MIN_PRIORITY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "priority": int(self.priority),
            "badge_icon": self.badge_icon,
            "name_color": None if self.name_color is None else self.name_color.to_spec(),
            "chat_color": None if self.chat_color is None else self.chat_color.to_hex(),
        }


# --- ResolutionLogEntry ------------------------------------------------------


@dataclass
class ResolutionLogEntry:
    """
    One resolution as written to the JSONL resolution log.

    `computed` holds ComputedRole.to_dict() output, so reading it back never
    needs to re-parse colors.
    """

    participant_id: Optional[int]
    assigned: List[int]
    computed: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "participant_id": self.participant_id,
            "assigned": [int(i) for i in self.assigned],
            "computed": dict(self.computed),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ResolutionLogEntry":
        pid = data.get("participant_id")
        return cls(
            participant_id=None if pid is None else int(pid),
            assigned=[int(i) for i in (data.get("assigned") or [])],
            computed=dict(data.get("computed") or {}),
        )
