"""Pytest configuration and fixtures."""

import logging

import pytest

from voltcheck import diagnostics
from voltcheck.assertions import ResponseDescription


@pytest.fixture(autouse=True)
def isolate_diagnostics(monkeypatch):
    """Keep the one-time diagnostics hook from leaking between tests."""
    monkeypatch.setattr(diagnostics, "_installed", False)
    monkeypatch.setattr(diagnostics, "install_traceback", lambda **kwargs: None)
    yield

    logger = logging.getLogger(diagnostics.LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def users_response():
    return ResponseDescription(
        status_code=200,
        headers={"Content-Type": "application/json; charset=utf-8", "X-Request-Id": "abc123"},
        body='{"data":{"users":[{"name":"John","age":30}],"token":"t-42","total":null}}',
        timing_ms=120,
    )
