from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod

import requests

from ..core.exceptions import NetworkError, UnsupportedCurrencyError
from ..core.models import RateQuote, RateTable
from ..core.utils import normalize_code, same_currency
from ..decorators import log_action
from .config import RateServiceConfig, load_rate_service_config

IDENTITY_DATE = "Today"

_logger = logging.getLogger("sherlock_currency")


class BaseRateClient(ABC):
    def __init__(self, cfg: RateServiceConfig | None = None) -> None:
        self.cfg = cfg or load_rate_service_config()

    @log_action("FETCH_RATE")
    def fetch_rate(self, from_currency: str, to_currency: str) -> RateQuote:
        """Return the current FROM→TO rate.

        Identical codes (case-insensitive) short-circuit to rate 1.0 dated
        "Today" without touching the network.

        Raises:
            NetworkError: transport failure, non-success status, bad body
            UnsupportedCurrencyError: target code absent from the rates
        """
        if same_currency(from_currency, to_currency):
            return RateQuote(rate=1.0, as_of_date=IDENTITY_DATE)
        frm = normalize_code(from_currency)
        to = normalize_code(to_currency)
        table = self.fetch_table(frm, to)
        rate = table.rate_for(to)
        if rate is None:
            raise UnsupportedCurrencyError(to)
        return RateQuote(rate=rate, as_of_date=table.date)

    @abstractmethod
    def fetch_table(self, base: str, symbol: str) -> RateTable:
        """Fetch the latest rates of ``base`` restricted to ``symbol``."""


class FrankfurterClient(BaseRateClient):
    SOURCE = "Frankfurter"

    def fetch_table(self, base: str, symbol: str) -> RateTable:
        params = {"base": base, "symbols": symbol}
        t0 = time.perf_counter()
        try:
            resp = requests.get(
                self.cfg.API_URL, params=params, timeout=self.cfg.REQUEST_TIMEOUT
            )
        except requests.exceptions.RequestException as exc:
            raise NetworkError(f"Network error ({self.SOURCE}): {exc}") from exc
        elapsed_ms = int((time.perf_counter() - t0) * 1000)
        status = resp.status_code
        _logger.debug(
            "%s GET base=%s symbols=%s status=%s request_ms=%d",
            self.SOURCE,
            base,
            symbol,
            status,
            elapsed_ms,
        )

        if not 200 <= status < 300:
            raise NetworkError(f"HTTP Error: {status}", status_code=status)

        try:
            return RateTable.from_payload(resp.json())
        except ValueError as exc:
            # JSONDecodeError is a ValueError too
            raise NetworkError(
                f"Malformed {self.SOURCE} response: {exc}", status_code=status
            ) from exc
