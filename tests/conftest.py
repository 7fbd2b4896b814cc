"""Shared pytest fixtures for the birthday-insights test suite.

Fixtures defined here are available to all test modules (unit, integration,
evaluation) without any import.

No AWS credentials or network access are required: the ``agent_runner``
fixture patches ``BedrockModel`` before any SDK initialisation can attempt a
network call, and ``feed_session`` stands in for the HTTP session used by
the "on this day" client.
"""

import datetime
import os

import pytest
from unittest.mock import MagicMock, patch

# ---------------------------------------------------------------------------
# Ensure MODEL_ARN is set before any test module is collected.
# The module-level ``settings = Settings()`` call in config.py runs at
# collection time; without this sentinel value pydantic-settings raises a
# ValidationError and the entire collection fails.
# ---------------------------------------------------------------------------
os.environ.setdefault("MODEL_ARN", "arn:aws:bedrock:us-east-1::foundation-model/test-model")


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_bedrock_model() -> MagicMock:
    """A MagicMock standing in for ``BedrockModel``; no AWS credentials needed."""
    model = MagicMock()
    model.invoke.return_value = {
        "role": "assistant",
        "content": [{"type": "text", "text": "Mocked response"}],
    }
    return model


# ---------------------------------------------------------------------------
# Agent fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def agent_runner(mock_bedrock_model: MagicMock):
    """Fully constructed ``strands.Agent`` with ``BedrockModel`` patched out."""
    with patch("birthday_insights.agent.BedrockModel", return_value=mock_bedrock_model):
        from birthday_insights import create_agent
        return create_agent()


# ---------------------------------------------------------------------------
# Feed fixtures
# ---------------------------------------------------------------------------

def make_response(payload: object, status_code: int = 200) -> MagicMock:
    """A MagicMock shaped like a ``requests.Response``."""
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.json.return_value = payload
    return response


@pytest.fixture
def feed_payloads() -> dict:
    """Minimal births/deaths/events payloads in the Wikipedia feed shape."""
    page = {
        "title": "Ada_Lovelace",
        "thumbnail": {"source": "https://upload.wikimedia.org/ada_thumb.jpg"},
        "content_urls": {
            "desktop": {"page": "https://en.wikipedia.org/wiki/Ada_Lovelace"},
            "mobile": {"page": "https://en.m.wikipedia.org/wiki/Ada_Lovelace"},
        },
    }
    return {
        "births": {
            "births": [
                {"text": "Ada Lovelace, English mathematician (d. 1852)", "year": 1815, "pages": [page]},
                {"text": "Someone Obscure", "year": 1901, "pages": []},
            ]
        },
        "deaths": {
            "deaths": [
                {"text": "Jane Doe, American writer (b. 1900)", "year": 1980},
            ]
        },
        "events": {
            "events": [
                {"text": "Treaty signed – Two nations end a war", "year": 1815, "pages": [page]},
                {"text": "A comet is observed", "year": 1901},
            ]
        },
    }


@pytest.fixture
def feed_session(feed_payloads: dict) -> MagicMock:
    """A MagicMock ``requests.Session`` that serves ``feed_payloads`` by URL."""
    session = MagicMock()
    session.headers = {}

    def _get(url: str, headers: dict | None = None, timeout: float | None = None) -> MagicMock:
        kind = url.split("/")[-3]
        return make_response(feed_payloads[kind])

    session.get.side_effect = _get
    return session


# ---------------------------------------------------------------------------
# Date fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def leap_day_birth() -> datetime.date:
    """A valid leap-day birth date (2000 is divisible by 400)."""
    return datetime.date(2000, 2, 29)


@pytest.fixture
def known_birth() -> datetime.date:
    return datetime.date(1990, 5, 15)


@pytest.fixture
def response_factory():
    """Expose ``make_response`` to tests that script their own HTTP replies."""
    return make_response


@pytest.fixture(autouse=True)
def fresh_feed_cache():
    """Drop the tools' shared client and per-day insights between tests."""
    from birthday_insights import tools
    tools._client.cache_clear()
    tools._insights.cache_clear()
    yield
    tools._client.cache_clear()
    tools._insights.cache_clear()
