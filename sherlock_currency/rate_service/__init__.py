"""Rate Service package.

Клиент внешнего API курсов (Frankfurter) и его конфигурация.

Публичная точка входа:
- api_clients.FrankfurterClient.fetch_rate(from, to): один запрос курса
- используется core.usecases.convert_currency
"""

from __future__ import annotations

__all__ = [
    "config",
    "api_clients",
]
