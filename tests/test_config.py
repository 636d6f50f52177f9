"""
Test settings loading and logging setup
"""
import json
import logging
import io

from a11yscan.core.config import Settings
from a11yscan.core.logging import setup_logging


def test_defaults(monkeypatch):
    for key in ("A11YSCAN_FETCH_TIMEOUT_MS", "A11YSCAN_DISABLED_RULES", "A11YSCAN_LOG_FORMAT"):
        monkeypatch.delenv(key, raising=False)
    settings = Settings(_env_file=None)
    assert settings.fetch_timeout_ms == 30000
    assert settings.max_redirects == 5
    assert settings.disabled_rules == []


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("A11YSCAN_FETCH_TIMEOUT_MS", "1500")
    monkeypatch.setenv("A11YSCAN_DISABLED_RULES", "landmark-nav, skip-link,")
    monkeypatch.setenv("A11YSCAN_LOG_FORMAT", "json")
    settings = Settings(_env_file=None)
    assert settings.fetch_timeout_ms == 1500
    assert settings.disabled_rules == ["landmark-nav", "skip-link"]
    assert settings.log_format == "json"


def test_openai_key_and_origins(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-test")
    monkeypatch.setenv("A11YSCAN_CORS_ORIGINS", "https://a.example,https://b.example")
    settings = Settings(_env_file=None)
    assert settings.openai_api_key == "sk-test"
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert Settings(_env_file=None, openai_api_key=None).openai_api_key is None


def test_json_logging():
    stream = io.StringIO()
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(Settings(log_format="json"), stream=stream)
        logging.getLogger("a11yscan.test").info("scan finished")
        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["message"] == "scan finished"
        assert record["level"] == "INFO"
        assert record["app"] == "A11yScan"
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
