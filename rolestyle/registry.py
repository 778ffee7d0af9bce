"""In-memory table of role definitions.

Pure storage: no resolution logic lives here. Identifiers are expected to be
unique but this is not checked; lookup returns the first match.
"""
from __future__ import annotations

from typing import Iterator, List, Optional, Sequence

from .types import RoleDefinition


class RoleRegistry:
    """Ordered, replaceable set of RoleDefinitions."""

    def __init__(self) -> None:
        self._roles: List[RoleDefinition] = []
        # bumped on every replace/clear
        self.generation = 0

    def replace(self, definitions: Sequence[RoleDefinition], copy: bool = True) -> None:
        """Discard the current contents and install `definitions`.

        With copy=False a list is adopted as-is; the caller hands it over and
        should not keep using it.
        """
        if not copy and isinstance(definitions, list):
            self._roles = definitions
        else:
            self._roles = list(definitions)
        self.generation += 1

    def clear(self) -> None:
        self._roles.clear()
        self.generation += 1

    def all(self) -> List[RoleDefinition]:
        """Live list of definitions. Mutations are visible to later lookups.

        Editing the list in place does not bump `generation`; call
        touch() afterwards so cached results get recomputed.
        """
        return self._roles

    def touch(self) -> None:
        """Mark the contents as changed after an in-place edit."""
        self.generation += 1

    def find(self, int_id: int) -> Optional[RoleDefinition]:
        for role in self._roles:
            if role.int_id == int_id:
                return role
        return None

    def __len__(self) -> int:
        return len(self._roles)

    def __iter__(self) -> Iterator[RoleDefinition]:
        return iter(self._roles)
