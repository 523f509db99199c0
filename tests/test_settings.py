import pytest

from wordfinder.settings import ENV_PREFIX, Settings, EDITABLE_FIELDS, update_settings, get_editable_settings


def _fresh_settings() -> Settings:
    """Create a fresh Settings instance for testing."""
    return Settings()


def test_defaults(monkeypatch):
    for name in ("TOP_N", "MAX_WORKERS", "PARALLEL_MIN_WORDS", "DEBUG"):
        monkeypatch.delenv(ENV_PREFIX + name, raising=False)
    cfg = _fresh_settings()
    assert cfg.TOP_N == 10
    assert cfg.MAX_WORKERS == 4
    assert cfg.DEBUG is False


def test_env_override(monkeypatch):
    monkeypatch.setenv("WORDFINDER_TOP_N", "5")
    monkeypatch.setenv("WORDFINDER_DEBUG", "yes")
    cfg = _fresh_settings()
    assert cfg.TOP_N == 5
    assert cfg.DEBUG is True


def test_unprefixed_env_ignored(monkeypatch):
    monkeypatch.delenv("WORDFINDER_TOP_N", raising=False)
    monkeypatch.setenv("TOP_N", "2")
    monkeypatch.setenv("MAX_WORKERS", "four")
    cfg = _fresh_settings()
    assert cfg.TOP_N == 10


def test_invalid_env_value_names_variable(monkeypatch):
    monkeypatch.setenv("WORDFINDER_MAX_WORKERS", "four")
    with pytest.raises(ValueError, match="WORDFINDER_MAX_WORKERS"):
        _fresh_settings()


def test_env_value_below_minimum(monkeypatch):
    monkeypatch.setenv("WORDFINDER_TOP_N", "-1")
    with pytest.raises(ValueError, match="WORDFINDER_TOP_N"):
        _fresh_settings()


def test_editable_fields_exist_on_settings():
    """All editable fields must be actual attributes on Settings."""
    cfg = _fresh_settings()
    for field_name in EDITABLE_FIELDS:
        assert hasattr(cfg, field_name), f"{field_name} not found on Settings"


def test_get_editable_settings():
    cfg = _fresh_settings()
    result = get_editable_settings(cfg)
    assert set(result.keys()) == set(EDITABLE_FIELDS.keys())
    assert result["TOP_N"] == cfg.TOP_N
    assert result["MAX_WORKERS"] == cfg.MAX_WORKERS


def test_update_int_field():
    cfg = _fresh_settings()
    errors = update_settings(cfg, MAX_WORKERS=7)
    assert errors == {}
    assert cfg.MAX_WORKERS == 7


def test_update_int_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, TOP_N="3")
    assert errors == {}
    assert cfg.TOP_N == 3


def test_update_bool_field():
    cfg = _fresh_settings()
    original = cfg.DEBUG
    errors = update_settings(cfg, DEBUG=not original)
    assert errors == {}
    assert cfg.DEBUG is (not original)


def test_update_bool_from_string():
    cfg = _fresh_settings()
    errors = update_settings(cfg, DEBUG="true")
    assert errors == {}
    assert cfg.DEBUG is True

    errors = update_settings(cfg, DEBUG="false")
    assert errors == {}
    assert cfg.DEBUG is False


def test_update_multiple_fields():
    cfg = _fresh_settings()
    errors = update_settings(cfg, TOP_N=20, MAX_WORKERS=2, PARALLEL_MIN_WORDS=0)
    assert errors == {}
    assert cfg.TOP_N == 20
    assert cfg.MAX_WORKERS == 2
    assert cfg.PARALLEL_MIN_WORDS == 0


def test_update_below_minimum_returns_error():
    cfg = _fresh_settings()
    before = cfg.MAX_WORKERS
    errors = update_settings(cfg, MAX_WORKERS=0, TOP_N=-1)
    assert set(errors) == {"MAX_WORKERS", "TOP_N"}
    assert cfg.MAX_WORKERS == before


def test_update_invalid_value_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, TOP_N="ten", MAX_WORKERS=True)
    assert "TOP_N" in errors
    assert "MAX_WORKERS" in errors


def test_update_unknown_field_returns_error():
    cfg = _fresh_settings()
    errors = update_settings(cfg, NONEXISTENT_FIELD=42)
    assert errors == {"NONEXISTENT_FIELD": "unknown setting"}


def test_update_partial_error():
    """Valid fields update even when invalid fields are present."""
    cfg = _fresh_settings()
    errors = update_settings(cfg, TOP_N=25, BAD_FIELD="nope")
    assert "BAD_FIELD" in errors
    assert cfg.TOP_N == 25
