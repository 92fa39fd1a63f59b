import logging
import sys

import pytest

import config
from config import STACK_HEADROOM, Settings, get_settings, override_settings, reset_settings


def test_defaults():
    settings = Settings()
    assert settings.max_depth == 800
    assert settings.max_naive_calls == 3_000_000
    assert settings.overflow_policy == "checked"
    assert settings.int_bits == 64
    assert settings.log_level == "INFO"

def test_from_env(monkeypatch):
    monkeypatch.setenv("RECURSION_MAX_DEPTH", "50")
    monkeypatch.setenv("RECURSION_OVERFLOW_POLICY", " Wrap ")
    monkeypatch.setenv("RECURSION_INT_BITS", "32")
    monkeypatch.setenv("RECURSION_LOG_LEVEL", "debug")
    settings = Settings.from_env()
    assert settings == Settings(max_depth=50, overflow_policy="wrap", int_bits=32, log_level="DEBUG")

@pytest.mark.parametrize("name, value", [
    ("RECURSION_MAX_DEPTH", "0"),
    ("RECURSION_MAX_DEPTH", "lots"),
    ("RECURSION_OVERFLOW_POLICY", "saturate"),
    ("RECURSION_INT_BITS", "16"),
])
def test_from_env_rejects_invalid_values(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError):
        Settings.from_env()

def test_from_env_rejects_depth_above_interpreter_limit(monkeypatch, caplog):
    monkeypatch.setenv("RECURSION_MAX_DEPTH", "100000")
    with caplog.at_level(logging.ERROR, logger="config"):
        with pytest.raises(ValueError, match="interpreter recursion limit"):
            Settings.from_env()
    assert "Invalid recursion settings" in caplog.text

def test_depth_ceiling_cannot_exceed_interpreter_limit():
    cap = sys.getrecursionlimit() - STACK_HEADROOM
    assert Settings(max_depth=cap).max_depth == cap
    with pytest.raises(ValueError):
        Settings(max_depth=cap + 1)

def test_override_rejects_depth_above_interpreter_limit():
    before = get_settings()
    with pytest.raises(ValueError):
        with override_settings(max_depth=5000):
            pass
    assert get_settings() is before

def test_from_env_reads_call_budget(monkeypatch):
    monkeypatch.setenv("RECURSION_MAX_NAIVE_CALLS", "1000")
    assert Settings.from_env().max_naive_calls == 1000
    with pytest.raises(ValueError):
        Settings(max_naive_calls=0)

def test_get_settings_caches_until_reset(monkeypatch):
    monkeypatch.setattr(config, "_settings", None)
    monkeypatch.setenv("RECURSION_MAX_DEPTH", "123")
    assert get_settings().max_depth == 123
    monkeypatch.setenv("RECURSION_MAX_DEPTH", "456")
    assert get_settings().max_depth == 123
    reset_settings()
    assert get_settings().max_depth == 456

def test_override_settings_restores_previous():
    before = get_settings()
    with override_settings(max_depth=7) as settings:
        assert settings.max_depth == 7
        assert get_settings().max_depth == 7
    assert get_settings() is before

def test_override_settings_restores_after_error():
    before = get_settings()
    with pytest.raises(RuntimeError):
        with override_settings(overflow_policy="wrap"):
            raise RuntimeError("boom")
    assert get_settings() is before
