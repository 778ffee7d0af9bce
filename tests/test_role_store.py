from __future__ import annotations

import json
from pathlib import Path

import sqlalchemy as sa
from sqlalchemy.orm import sessionmaker

from rolestyle import models
from rolestyle.role_store import (
    RoleStore,
    definitions_from_data,
    dump_definitions_json,
    load_definitions_json,
)
from rolestyle.types import RoleDefinition


def _sqlite_session(tmp_path):
    engine = sa.create_engine(f"sqlite:///{tmp_path / 'roles.db'}")
    models.Base.metadata.create_all(engine)
    return sessionmaker(bind=engine, expire_on_commit=False)


def test_definitions_from_data_accepts_both_shapes():
    rows = [{"int_id": 1, "priority": 3, "badge_icon": "star"}]
    assert definitions_from_data(rows)[0].badge_icon == "star"
    assert definitions_from_data({"roles": rows})[0].priority == 3
    assert definitions_from_data("nonsense") == []


def test_definitions_from_data_skips_bad_entries():
    rows = [
        {"int_id": 1, "priority": 1},
        "not a role",
        {"priority": 2},  # no int_id
        {"int_id": "x"},
        {"int_id": 3, "priority": 4, "name_color": None},
    ]
    defs = definitions_from_data(rows)
    assert [d.int_id for d in defs] == [1, 3]
    assert defs[1].name_color == ""


def test_json_dump_and_load(tmp_path: Path):
    path = tmp_path / "nested" / "roles.json"
    defs = [
        RoleDefinition(int_id=2, priority=10, string_id="admin", name_color="#ff0000>#0000ff"),
        RoleDefinition(int_id=1, priority=1, chat_color="#abc", permissions={"mute": True}),
    ]
    dump_definitions_json(path, defs)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert [r["int_id"] for r in data["roles"]] == [2, 1]
    assert load_definitions_json(path) == defs


def test_role_store_replaces_table_and_keeps_order(tmp_path):
    Session = _sqlite_session(tmp_path)
    store = RoleStore()

    with Session() as s:
        store.save_definitions(s, [RoleDefinition(int_id=9, priority=0)])
        s.commit()

    defs = [
        RoleDefinition(int_id=5, priority=1, string_id="vip", badge_icon="gem", permissions={"a": 1}),
        RoleDefinition(int_id=3, priority=7, string_id="mod", chat_color="#00ff00"),
    ]
    with Session() as s:
        store.save_definitions(s, defs)
        s.commit()

    with Session() as s:
        loaded = store.load_definitions(s)

    assert loaded == defs
