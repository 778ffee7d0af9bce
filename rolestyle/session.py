"""Per-session tracking of participants' computed roles.

Holds each participant's last assignment and the ComputedRole derived from
it. When fresh role definitions arrive every tracked participant is
recomputed, since a cached ComputedRole is only valid for the registry
snapshot it was computed against.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional, Sequence, Tuple

from .resolution import RoleManager
from .types import ComputedRole, RoleDefinition

logger = logging.getLogger(__name__)


@dataclass
class ParticipantRoles:
    manager: RoleManager = field(default_factory=RoleManager)
    _assignments: Dict[int, Tuple[int, ...]] = field(default_factory=dict, init=False, repr=False)
    _computed: Dict[int, ComputedRole] = field(default_factory=dict, init=False, repr=False)
    # registry generation each cached ComputedRole was computed against
    _generations: Dict[int, int] = field(default_factory=dict, init=False, repr=False)

    def _compute(self, participant_id: int, assigned: Tuple[int, ...]) -> ComputedRole:
        computed = self.manager.compute(assigned)
        self._assignments[participant_id] = assigned
        self._computed[participant_id] = computed
        self._generations[participant_id] = self.manager.registry.generation
        return computed

    def load_roles(self, definitions: Sequence[RoleDefinition]) -> None:
        """Install a new definition set and recompute everyone."""
        self.manager.set_all_roles(definitions)
        for pid, assigned in list(self._assignments.items()):
            self._compute(pid, assigned)
        logger.debug(
            "loaded %d role definitions, recomputed %d participants",
            len(self.manager.get_all_roles()),
            len(self._assignments),
        )

    def update(self, participant_id: int, assigned_ids: Iterable[int]) -> ComputedRole:
        """Record a participant's assignment and return their ComputedRole.

        The cached result is reused only while both the assignment and the
        registry generation are unchanged.
        """
        assigned = tuple(assigned_ids)
        cached = self._computed.get(participant_id)
        if (
            cached is not None
            and self._assignments.get(participant_id) == assigned
            and self._generations.get(participant_id) == self.manager.registry.generation
        ):
            return cached
        return self._compute(participant_id, assigned)

    def get(self, participant_id: int) -> Optional[ComputedRole]:
        return self._computed.get(participant_id)

    def forget(self, participant_id: int) -> None:
        self._assignments.pop(participant_id, None)
        self._computed.pop(participant_id, None)
        self._generations.pop(participant_id, None)

    def disconnect(self) -> None:
        """Drop all role data for the session."""
        self.manager.clear_all_roles()
        self._assignments.clear()
        self._computed.clear()
        self._generations.clear()
        logger.debug("cleared role data on disconnect")

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._computed

    def __len__(self) -> int:
        return len(self._computed)
