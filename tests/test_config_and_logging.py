"""Tests de `AppSettings` y `setup_logging`."""

from __future__ import annotations

import io
import logging

import pytest
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from core.config import AppSettings
from core.log import setup_logging


class TestAppSettings:
    def test_defaults(self, monkeypatch):
        for name in ("PROMISIFY_USER_AGENT", "PROMISIFY_GITHUB_API_BASE_URL", "PROMISIFY_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        settings = AppSettings(_env_file=None)
        assert settings.user_agent == "request"
        assert settings.github_api_base_url == "https://api.github.com"
        assert settings.http_timeout_seconds == 20.0
        assert settings.log_level == "WARNING"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("PROMISIFY_USER_AGENT", "my-client/1.0")
        monkeypatch.setenv("PROMISIFY_GITHUB_API_BASE_URL", "https://ghe.example.com/api/v3/")
        settings = AppSettings(_env_file=None)
        assert settings.user_agent == "my-client/1.0"
        assert settings.github_api_base_url == "https://ghe.example.com/api/v3"

    def test_rejects_bad_values(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, http_timeout_seconds=0)
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, log_level="chatty")


class TestSetupLogging:
    def _rich_handlers(self):
        return [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]

    def test_installs_single_handler(self):
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        try:
            setup_logging("DEBUG", console=Console(file=io.StringIO()))
            setup_logging("INFO", console=Console(file=io.StringIO()))
            assert len(self._rich_handlers()) == 1
            assert root.level == logging.INFO
        finally:
            for h in self._rich_handlers():
                root.removeHandler(h)
            root.handlers[:] = before
            root.setLevel(level)

    def test_level_from_settings_and_output(self):
        root = logging.getLogger()
        before = list(root.handlers)
        level = root.level
        buffer = io.StringIO()
        try:
            settings = AppSettings(_env_file=None, log_level="warning")
            logger = setup_logging(settings=settings, console=Console(file=buffer, width=200))
            assert root.level == logging.WARNING
            logger.warning("rate limited")
            assert "rate limited" in buffer.getvalue()
        finally:
            root.handlers[:] = before
            root.setLevel(level)
