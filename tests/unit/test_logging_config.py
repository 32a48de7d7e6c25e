# tests/unit/test_logging_config.py
import logging

from lazyfs import logging_config


def _capture(monkeypatch):
    seen = {}

    def fake_basic_config(**kwargs):
        seen.update(kwargs)

    monkeypatch.setattr(logging_config.logging, "basicConfig", fake_basic_config)
    return seen


def test_default_level_is_info(monkeypatch):
    monkeypatch.delenv("LAZYFS_LOG_LEVEL", raising=False)
    seen = _capture(monkeypatch)
    logging_config.setup_logging()
    assert seen["level"] == logging.INFO
    assert "%(name)s" in seen["format"]


def test_env_level_is_honoured(monkeypatch):
    monkeypatch.setenv("LAZYFS_LOG_LEVEL", "debug")
    seen = _capture(monkeypatch)
    logging_config.setup_logging()
    assert seen["level"] == logging.DEBUG


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LAZYFS_LOG_LEVEL", "chatty")
    seen = _capture(monkeypatch)
    logging_config.setup_logging()
    assert seen["level"] == logging.INFO
