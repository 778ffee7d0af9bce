from rolestyle.colors import parse_rich_color
from rolestyle.types import MIN_PRIORITY, RGB, ComputedRole, ResolutionLogEntry, RoleDefinition


def test_role_definition_roundtrip_dict():
    data = {
        "int_id": 4,
        "priority": -3,
        "string_id": "helper",
        "badge_icon": "wrench",
        "name_color": "#ff0000|#00ff00",
        "chat_color": "#fff",
        "permissions": {"kick": False},
    }

    role = RoleDefinition.from_dict(data)
    as_dict = role.to_dict()

    assert as_dict == data
    assert role.priority == -3


def test_role_definition_defaults():
    role = RoleDefinition.from_dict({"int_id": 1})
    assert role.priority == 0
    assert role.badge_icon == ""
    assert role.permissions == {}


def test_computed_role_to_dict():
    empty = ComputedRole().to_dict()
    assert empty == {"priority": MIN_PRIORITY, "badge_icon": "", "name_color": None, "chat_color": None}

    full = ComputedRole(
        priority=3,
        badge_icon="star",
        name_color=parse_rich_color("#FF0000>#0000ff"),
        chat_color=RGB(1, 2, 3),
    ).to_dict()
    assert full["name_color"] == "#ff0000>#0000ff"
    assert full["chat_color"] == "#010203"


def test_resolution_log_entry_from_dict_defaults():
    entry = ResolutionLogEntry.from_dict({"assigned": ["1", 2]})
    assert entry.participant_id is None
    assert entry.assigned == [1, 2]
    assert entry.computed == {}
