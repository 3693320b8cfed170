"""Test debug configuration."""
from ctxerr import DEBUG, DebugConfig, Error


def test_defaults_and_toggle():
    """Test that debug starts disabled and can be toggled."""
    cfg = DebugConfig()
    assert cfg.enabled is False
    assert cfg.trace_limit is None

    cfg.enable()
    assert cfg.enabled is True
    cfg.disable()
    assert cfg.enabled is False


def test_from_env(monkeypatch):
    """Test reading the debug switch and trace limit from the environment."""
    monkeypatch.setenv("CTXERR_DEBUG", "true")
    monkeypatch.setenv("CTXERR_TRACE_LIMIT", "5")

    cfg = DebugConfig.from_env()

    assert cfg.enabled is True
    assert cfg.trace_limit == 5
    assert cfg.env_prefix == "CTXERR_"


def test_from_env_ignores_invalid_values(monkeypatch):
    """Test that unknown flags and bad limits fall back to defaults."""
    monkeypatch.setenv("CTXERR_DEBUG", "maybe")
    monkeypatch.setenv("CTXERR_TRACE_LIMIT", "lots")

    cfg = DebugConfig.from_env()

    assert cfg.enabled is False
    assert cfg.trace_limit is None


def test_from_env_custom_prefix(monkeypatch):
    """Test that the prefix selects which variables are read."""
    monkeypatch.setenv("BILLING_DEBUG", "1")
    monkeypatch.delenv("CTXERR_DEBUG", raising=False)

    assert DebugConfig.from_env(prefix="BILLING_").enabled is True
    assert DebugConfig.from_env().enabled is False


def test_trace_limit_applies_to_render():
    """Test that the trace limit caps the frames appended to a rendering."""
    err = Error("limited", config=DebugConfig(enabled=True, trace_limit=1))

    rendered = err.render()

    assert rendered.count('File "') == 1


def test_default_config_is_shared():
    """Test that errors use the process-wide config unless told otherwise."""
    assert Error("x").config is DEBUG
    assert DEBUG.enabled is False


def test_load_env_uses_own_prefix(monkeypatch):
    """Test that load_env reads the variables named by env_prefix."""
    monkeypatch.setenv("BILLING_DEBUG", "on")
    monkeypatch.setenv("BILLING_TRACE_LIMIT", "3")
    monkeypatch.setenv("CTXERR_DEBUG", "0")

    cfg = DebugConfig(env_prefix="BILLING_")

    assert cfg.load_env() is cfg
    assert cfg.enabled is True
    assert cfg.trace_limit == 3


def test_load_env_keeps_values_when_unset(monkeypatch):
    """Test that unset variables and bad limits leave the config unchanged."""
    monkeypatch.delenv("CTXERR_DEBUG", raising=False)
    monkeypatch.setenv("CTXERR_TRACE_LIMIT", "lots")

    cfg = DebugConfig(enabled=True, trace_limit=7)
    cfg.load_env()

    assert cfg.enabled is True
    assert cfg.trace_limit == 7
