from __future__ import annotations

import inspect
import logging
from functools import wraps
from typing import Any, Callable

from .core.exceptions import ConversionError, ErrorKind
from .core.models import Conversion, ConversionRequest, RateQuote

_logger = logging.getLogger("sherlock_currency")


def _request_fields(bound: dict[str, Any]) -> dict[str, Any]:
    """Best-effort extraction of currencies/amount from call arguments."""
    request = bound.get("request")
    if isinstance(request, ConversionRequest):
        return {
            "frm": request.from_currency,
            "to": request.to_currency,
            "amount": request.amount,
        }
    return {
        "frm": str(bound.get("from_currency") or "").upper() or None,
        "to": str(bound.get("to_currency") or "").upper() or None,
        "amount": None,
    }


def _rate_of(result: Any) -> float | None:
    if isinstance(result, RateQuote):
        return result.rate
    if isinstance(result, Conversion):
        return result.quote.rate
    return None


def log_action(action: str) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator to log pipeline steps at INFO level.

    Logs action, from/to currency, amount and rate when present, and
    result (OK/ERROR with error kind). Does not swallow exceptions.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        sig = inspect.signature(func)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                bound = sig.bind_partial(*args, **kwargs).arguments
            except TypeError:
                bound = {}
            fields = _request_fields(bound)
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                kind = exc.kind if isinstance(exc, ConversionError) else ErrorKind.GENERIC
                _logger.info(
                    "%s from='%s' to='%s' amount=%s result=ERROR "
                    "error_kind=%s error_message='%s'",
                    action,
                    fields["frm"],
                    fields["to"],
                    fields["amount"],
                    kind.value,
                    str(exc).replace("'", "\\'"),
                )
                raise
            _logger.info(
                "%s from='%s' to='%s' amount=%s rate=%s result=OK",
                action,
                fields["frm"],
                fields["to"],
                fields["amount"],
                _rate_of(result),
            )
            return result

        return wrapper

    return decorator
