from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from rolestyle.types import ComputedRole, ResolutionLogEntry

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Basic stderr logging for CLI use. Unknown level names fall back to INFO."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO
    logging.basicConfig(level=numeric, format="%(levelname)s %(name)s: %(message)s")


class JsonlResolutionLogger:
    """
    Minimal JSONL logger for role resolutions.

    Writes one JSON object per line.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def write_entry(self, entry: ResolutionLogEntry) -> None:
        line = json.dumps(entry.to_dict(), separators=(",", ":"))
        with self._path.open("a", encoding="utf-8") as f:
            f.write(line)
            f.write("\n")


def log_resolution(
    res_logger: JsonlResolutionLogger,
    assigned: Iterable[int],
    computed: ComputedRole,
    participant_id: Optional[int] = None,
) -> None:
    entry = ResolutionLogEntry(
        participant_id=participant_id,
        assigned=list(assigned),
        computed=computed.to_dict(),
    )
    # A failed log write must not break resolution.
    try:
        res_logger.write_entry(entry)
    except OSError as e:
        logger.debug("could not write resolution entry: %s", e)


def read_resolution_entries(path: Path) -> List[ResolutionLogEntry]:
    """Read a JSONL file of resolution entries.

    Fail-soft: if the file doesn't exist, return an empty list. Any
    malformed lines are skipped.
    """
    p = Path(path)
    if not p.exists():
        return []
    entries: List[ResolutionLogEntry] = []
    with p.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                entries.append(ResolutionLogEntry.from_dict(json.loads(line)))
            except (ValueError, TypeError, AttributeError):
                # skip malformed lines
                continue
    return entries
