"""Rolestyle package.

Mirrors a multiplayer session's role assignments and resolves each
participant's roles into one set of display attributes.
"""

from .types import ComputedRole, RoleDefinition  # re-export core types
from .resolution import RoleManager, compute_role

__all__ = [
    "config",
    "colors",
    "registry",
    "resolution",
    "session",
    "role_store",
    # re-exports
    "ComputedRole",
    "RoleDefinition",
    "RoleManager",
    "compute_role",
]
