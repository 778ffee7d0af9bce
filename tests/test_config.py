from pathlib import Path


def test_bool_from_env_true_false(monkeypatch):
    from rolestyle import config as cfg
    # default false
    assert cfg._bool_from_env("NON_EXISTENT_FLAG", default=False) is False
    assert cfg._bool_from_env("NON_EXISTENT_FLAG", default=True) is True

    monkeypatch.setenv("FLAG_TRUE", "true")
    monkeypatch.setenv("FLAG_YES", "Yes")
    monkeypatch.setenv("FLAG_ONE", "1")
    monkeypatch.setenv("FLAG_ON", " on ")

    assert cfg._bool_from_env("FLAG_TRUE", default=False) is True
    assert cfg._bool_from_env("FLAG_YES", default=False) is True
    assert cfg._bool_from_env("FLAG_ONE", default=False) is True
    assert cfg._bool_from_env("FLAG_ON", default=False) is True

    monkeypatch.setenv("FLAG_FALSE", "false")
    assert cfg._bool_from_env("FLAG_FALSE", default=True) is False


def test_settings_defaults(monkeypatch):
    for key in ["DATABASE_URL", "ECHO_SQL", "LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)

    from rolestyle.config import DEFAULT_DB_URL, get_settings

    settings = get_settings()
    assert settings.database_url == DEFAULT_DB_URL
    assert settings.echo_sql is False
    assert settings.log_level == "INFO"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///other.db")
    monkeypatch.setenv("ECHO_SQL", "yes")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    from rolestyle.config import get_settings

    settings = get_settings()
    assert settings.database_url == "sqlite:///other.db"
    assert settings.echo_sql is True
    assert settings.log_level == "DEBUG"


def test_paths_read_env_at_call_time(monkeypatch, tmp_path):
    from rolestyle.config import get_resolution_log_path, get_roles_path

    monkeypatch.delenv("ROLES_PATH", raising=False)
    assert get_roles_path() == Path("roles.json")

    monkeypatch.setenv("ROLES_PATH", str(tmp_path / "r.json"))
    monkeypatch.setenv("RESOLUTION_LOG_PATH", str(tmp_path / "res.jsonl"))
    assert get_roles_path() == tmp_path / "r.json"
    assert get_resolution_log_path() == tmp_path / "res.jsonl"


def test_resolution_log_path_off_when_unset(monkeypatch):
    from rolestyle.config import get_resolution_log_path

    monkeypatch.delenv("RESOLUTION_LOG_PATH", raising=False)
    assert get_resolution_log_path() is None

    monkeypatch.setenv("RESOLUTION_LOG_PATH", "   ")
    assert get_resolution_log_path() is None
