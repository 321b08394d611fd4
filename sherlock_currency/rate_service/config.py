from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Final

from dotenv import find_dotenv, load_dotenv

DEFAULT_API_URL: Final[str] = "https://api.frankfurter.dev/v1/latest"
ENV_PREFIX: Final[str] = "SHERLOCK_CURRENCY_"

_dotenv_loaded = False


@dataclass(frozen=True)
class RateServiceConfig:
    # Эндпоинт latest-курсов
    API_URL: str

    # Сетевые параметры (None: дефолт HTTP-клиента)
    REQUEST_TIMEOUT: float | None

    # Логирование
    LOG_LEVEL: str
    LOG_FILE: str | None


def _load_dotenv_once() -> None:
    global _dotenv_loaded
    if _dotenv_loaded:
        return
    _dotenv_loaded = True
    path = find_dotenv(usecwd=True)
    if path:
        load_dotenv(dotenv_path=path, override=False)


def _parse_timeout(raw: str | None) -> float | None:
    if raw is None or not raw.strip():
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def load_rate_service_config() -> RateServiceConfig:
    """Load rate service configuration from env/.env.

    Returns a frozen RateServiceConfig. Environment variables override .env;
    every field has a default, so an empty environment is valid.
    """
    _load_dotenv_once()
    log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE") or None
    return RateServiceConfig(
        API_URL=os.getenv(f"{ENV_PREFIX}API_URL") or DEFAULT_API_URL,
        REQUEST_TIMEOUT=_parse_timeout(os.getenv(f"{ENV_PREFIX}HTTP_TIMEOUT")),
        LOG_LEVEL=str(os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO")).upper(),
        LOG_FILE=log_file,
    )
