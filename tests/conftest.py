"""
Shared test fixtures.
"""

import pytest
import structlog

from hibc.config.settings import get_settings


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from HIBC_* environment variables and cached settings."""
    for name in ("HIBC_LABELER_CODE", "HIBC_MODULUS", "HIBC_LOG_LEVEL", "HIBC_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
