"""Shared fixtures: isolated env/logging and a canned rate service."""

from __future__ import annotations

import logging
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from sherlock_currency.core.models import RateTable
from sherlock_currency.logging_config import LOGGER_NAME
from sherlock_currency.rate_service import config as rs_config
from sherlock_currency.rate_service.api_clients import BaseRateClient
from sherlock_currency.rate_service.config import RateServiceConfig

TEST_API_URL = "https://rates.test/v1/latest"


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for var in ("API_URL", "HTTP_TIMEOUT", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"SHERLOCK_CURRENCY_{var}", raising=False)
    # never pick up a developer's .env
    monkeypatch.setattr(rs_config, "_dotenv_loaded", True)
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True


@pytest.fixture
def cfg() -> RateServiceConfig:
    return RateServiceConfig(
        API_URL=TEST_API_URL, REQUEST_TIMEOUT=None, LOG_LEVEL="INFO", LOG_FILE=None
    )


def make_response(status: int = 200, payload: Any = None, json_error: Exception | None = None):
    response = MagicMock(spec=requests.Response)
    response.status_code = status
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


class StubRateClient(BaseRateClient):
    """Serves a fixed table (or raises) and records every remote lookup."""

    def __init__(self, cfg: RateServiceConfig, table: RateTable | None = None,
                 error: Exception | None = None) -> None:
        super().__init__(cfg)
        self.table = table
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def fetch_table(self, base: str, symbol: str) -> RateTable:
        self.calls.append((base, symbol))
        if self.error is not None:
            raise self.error
        assert self.table is not None
        return self.table


@pytest.fixture
def stub_client(cfg):
    def factory(rates: dict[str, float] | None = None, *, date: str = "2024-01-15",
                base: str = "USD", error: Exception | None = None) -> StubRateClient:
        table = None if rates is None else RateTable(base=base, date=date, rates=rates)
        return StubRateClient(cfg, table=table, error=error)

    return factory
