import logging

import pytest
import structlog

from gtp.config import get_settings
from gtp.logging import clear_context


@pytest.fixture(autouse=True)
def test_env(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("LOG_JSON", raising=False)
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    clear_context()
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()
