"""Shared fixtures for URL builder tests."""

import pytest

from forgeurl import config
from forgeurl.core.lazy import BatchLoader

BASE_URL = "https://forge.example.com"


@pytest.fixture(autouse=True)
def base_url(monkeypatch):
    """Pin the base URL and isolate process-wide state between tests."""
    monkeypatch.delenv(config.BASE_URL_ENV, raising=False)
    monkeypatch.delenv(config.CONFIG_PATH_ENV, raising=False)
    monkeypatch.setattr(config, "_dotenv_loaded", True)
    config.reset_base_url()
    config.set_base_url(BASE_URL)
    yield BASE_URL
    config.reset_base_url()
    BatchLoader.clear()
