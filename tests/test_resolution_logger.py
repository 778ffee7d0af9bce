from __future__ import annotations

import json
from pathlib import Path

from rolestyle.logging_utils import JsonlResolutionLogger, log_resolution, read_resolution_entries
from rolestyle.types import RGB, ComputedRole


def test_jsonl_resolution_logger_writes_entry(tmp_path: Path):
    path = tmp_path / "logs" / "resolutions.jsonl"
    res_logger = JsonlResolutionLogger(path)

    computed = ComputedRole(priority=4, badge_icon="star", chat_color=RGB(255, 0, 0))
    log_resolution(res_logger, [3, 1], computed, participant_id=77)

    assert path.exists()
    lines = path.read_text(encoding="utf-8").strip().splitlines()
    assert len(lines) == 1
    data = json.loads(lines[0])
    assert data["participant_id"] == 77
    assert data["assigned"] == [3, 1]
    assert data["computed"]["chat_color"] == "#ff0000"
    assert data["computed"]["name_color"] is None


def test_read_resolution_entries_skips_malformed(tmp_path: Path):
    path = tmp_path / "resolutions.jsonl"
    res_logger = JsonlResolutionLogger(path)
    log_resolution(res_logger, [1], ComputedRole(priority=1))
    with path.open("a", encoding="utf-8") as f:
        f.write("{not json\n\n[1, 2]\n")
    log_resolution(res_logger, [], ComputedRole())

    entries = read_resolution_entries(path)
    assert len(entries) == 2
    assert entries[0].assigned == [1]
    assert entries[1].computed["badge_icon"] == ""


def test_read_resolution_entries_missing_file(tmp_path: Path):
    assert read_resolution_entries(tmp_path / "nope.jsonl") == []
