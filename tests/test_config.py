"""Tests for environment configuration and the JSON logger."""

import json
import logging
import sys
import os

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from teleclient import config
from teleclient.logger import TeleclientLogger, _JsonFormatter


# ── Settings ─────────────────────────────────────────────────────────────────


class TestLoadSettings:
    """Validate parsing of environment variables."""

    @pytest.fixture(autouse=True)
    def _clean_env(self, monkeypatch) -> None:
        for name in ("BOT_TOKEN", "TELEGRAM_API_HOST", "TELEGRAM_TIMEOUT", "LOG_LEVEL", "LOG_DIR"):
            monkeypatch.delenv(name, raising=False)

    def test_defaults(self) -> None:
        s = config.load_settings()
        assert s.bot_token is None
        assert s.api_host == "api.telegram.org"
        assert s.timeout == 10
        assert s.log_level == logging.INFO
        assert s.log_dir is None

    def test_values(self, monkeypatch) -> None:
        monkeypatch.setenv("BOT_TOKEN", "123:ABC")
        monkeypatch.setenv("TELEGRAM_API_HOST", " localhost:8081/ ")
        monkeypatch.setenv("TELEGRAM_TIMEOUT", "30")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        s = config.load_settings()
        assert s.bot_token == "123:ABC"
        assert s.api_host == "localhost:8081"
        assert s.timeout == 30
        assert s.log_level == logging.DEBUG

    @pytest.mark.parametrize("raw", ["abc", "0", "-5", ""])
    def test_invalid_timeout_falls_back(self, raw: str) -> None:
        assert config._parse_timeout(raw) == config.DEFAULT_TIMEOUT

    def test_unknown_level_falls_back(self) -> None:
        assert config._parse_level("LOUD") == logging.INFO


# ── Logger ───────────────────────────────────────────────────────────────────


class TestTeleclientLogger:
    """Validate the singleton logger and its JSON output."""

    @pytest.fixture(autouse=True)
    def _reset(self):
        TeleclientLogger.reset()
        yield
        TeleclientLogger.reset()

    def test_singleton(self) -> None:
        assert TeleclientLogger.get_logger() is TeleclientLogger.get_logger()
        assert TeleclientLogger() is TeleclientLogger()

    def test_console_only_by_default(self) -> None:
        logger = TeleclientLogger.get_logger()
        assert len(logger.handlers) == 1

    def test_file_handler_with_log_dir(self, tmp_path) -> None:
        logger = TeleclientLogger.get_logger(log_dir=str(tmp_path))
        logger.info("hello", extra={"api_endpoint": "getMe"})
        for handler in logger.handlers:
            handler.flush()

        line = (tmp_path / "teleclient.log").read_text(encoding="utf-8").strip().splitlines()[-1]
        entry = json.loads(line)
        assert entry["message"] == "hello"
        assert entry["api_endpoint"] == "getMe"
        assert entry["logger"] == "teleclient"

    def test_configure_updates_existing_logger(self, tmp_path) -> None:
        """Settings applied after the logger exists must still take effect."""
        logger = TeleclientLogger.get_logger()
        assert logger.level == logging.INFO

        configured = TeleclientLogger.configure(logging.DEBUG, str(tmp_path))

        assert configured is logger
        assert logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.handlers)
        assert len(logger.handlers) == 2
        TeleclientLogger.configure(logging.DEBUG, str(tmp_path))
        assert len(logger.handlers) == 2

    def test_from_env_applies_log_settings(self, monkeypatch, tmp_path) -> None:
        from teleclient.client import TelegramClient

        TelegramClient("123:ABC")
        monkeypatch.setenv("BOT_TOKEN", "123:ABC")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        monkeypatch.setenv("LOG_DIR", str(tmp_path))
        TelegramClient.from_env()

        logger = TeleclientLogger.get_logger()
        assert logger.level == logging.WARNING
        assert (tmp_path / "teleclient.log").exists()

    def test_formatter_includes_exception(self) -> None:
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = logging.getLogger("x").makeRecord(
                "x", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = json.loads(_JsonFormatter().format(record))
        assert entry["level"] == "ERROR"
        assert "RuntimeError: boom" in entry["exc_info"]
