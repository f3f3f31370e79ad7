"""Pytest configuration for the mindbridge test suite.

Keeps every test hermetic: provider credentials from the developer shell are
removed, ``.env`` loading is disabled, and pooled HTTP clients are dropped
after each test.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

import pytest

from mindbridge.base.http import client as http_pool
from mindbridge.base.logging import get_logger
from mindbridge.config.env import BASE_URL_ENV_MAP, ENV_MAP, MODELS_ENV_MAP

_ALL_ENV = (
    list(ENV_MAP.values())
    + list(BASE_URL_ENV_MAP.values())
    + list(MODELS_ENV_MAP.values())
    + ["MINDBRIDGE_LOG_LEVEL"]
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip provider variables and point ``.env`` loading at a missing file."""
    for name in _ALL_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", "/nonexistent/.env")
    yield
    http_pool._CLIENTS.clear()


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)


@pytest.fixture()
def log_records() -> Iterator[List[logging.LogRecord]]:
    """Capture records reaching the shared ``mindbridge`` logger."""
    logger = get_logger()
    handler = _ListHandler()
    logger.addHandler(handler)
    yield handler.records
    logger.removeHandler(handler)
