from pathlib import Path

from wordgrid.settings import Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults():
    cfg = _fresh_settings()
    assert cfg.DICTIONARY_PATH == cfg.BASE_DIR / "words"
    assert cfg.BOARD == "atgc/lrje/jrfg/mhes"
    assert cfg.NOTIFY is False


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("MAX_RESULTS", "12")
    monkeypatch.setenv("NOTIFY", "yes")
    monkeypatch.setenv("DICTIONARY_PATH", str(tmp_path / "list.txt"))
    monkeypatch.setenv("BOARD", "ab/cd")
    cfg = _fresh_settings()
    assert cfg.MAX_RESULTS == 12
    assert cfg.NOTIFY is True
    assert cfg.DICTIONARY_PATH == Path(tmp_path / "list.txt")
    assert cfg.BOARD == "ab/cd"


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["MAX_RESULTS"] == cfg.MAX_RESULTS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=7)
    assert errors == {}
    assert cfg.MAX_RESULTS == 7


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_bool_from_json_true():
    """JSON sends true/false as Python bool, not string."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, NOTIFY=True)
    assert errors == {}
    assert cfg.NOTIFY is True


def test_update_string_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NTFY_TOPIC="test-topic")
    assert errors == {}
    assert cfg.NTFY_TOPIC == "test-topic"


def test_update_non_editable_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, PORT=8000)
    assert "PORT" in errors
    assert cfg.PORT == 10001


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert "NONEXISTENT_FIELD" in errors


def test_update_bad_value_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS="many")
    assert "MAX_RESULTS" in errors
    assert cfg.MAX_RESULTS == 0


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_RESULTS=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.MAX_RESULTS == 25
