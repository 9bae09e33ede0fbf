"""
Shared pytest fixtures for StratBot tests.

This module provides common fixtures used across all test modules.
Import fixtures from here instead of defining them in individual test files.
"""
from __future__ import annotations

import pytest
from typing import Any, Dict, List

from stratbot.tests.utils import data_record, envelope, indicator, topic

SETTINGS_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENROUTER_API_KEY",
    "LLM_MODEL",
    "WORLDBANK_BASE_URL",
    "HTTP_TIMEOUT",
    "LOG_LEVEL",
)


# ============================================================================
# Environment Fixtures
# ============================================================================

@pytest.fixture(autouse=True)
def test_environment(monkeypatch):
    """Isolate every test from real API keys, local overrides and cached settings."""
    from stratbot.config import get_settings

    for key in SETTINGS_ENV_VARS:
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ============================================================================
# Data Fixtures
# ============================================================================

@pytest.fixture
def topics_payload() -> List[Any]:
    """Sample /topic response."""
    return envelope([topic("1", "Agriculture & Rural Development"), topic("2", "Aid Effectiveness"), topic("3", "Economy & Growth")])


@pytest.fixture
def data_payload() -> List[Any]:
    """Sample /country/{country}/indicator/{indicator} response."""
    return envelope(
        [
            data_record("USA", "2020", 21060473613000.0),
            data_record("USA", "2019", 21380976119000.0),
            data_record("CAN", "2020", None),
        ],
        per_page=50,
    )


@pytest.fixture
def indicator_records() -> Dict[str, List[Dict[str, Any]]]:
    """Indicator payloads per topic ID."""
    return {
        "1": [indicator("AG.LND.AGRI.ZS", ["1"]), indicator("AG.PRD.CROP.XD", ["1"])],
        "3": [indicator("NY.GDP.MKTP.CD", ["3"])],
    }
