"""CLI entrypoint for Sherlock Currency.

All arguments are joined into one query, e.g. ``sherlock-currency 100 usd
in chf``. Exactly one JSON result document goes to stdout; diagnostics go
to stderr. Conversion logic lives in core.usecases.
"""

from __future__ import annotations

import logging
import sys

from ..core.exceptions import ConversionError, GenericConversionError, UsageError
from ..core.models import ResultDocument
from ..core.parser import parse_query
from ..core.usecases import convert_currency
from ..logging_config import LOGGER_NAME, configure_logging
from ..rate_service.api_clients import BaseRateClient, FrankfurterClient
from .formatter import render_error, render_success

_logger = logging.getLogger(LOGGER_NAME)


def _emit(doc: ResultDocument) -> None:
    # launcher reads UTF-8 regardless of the locale
    if hasattr(sys.stdout, "reconfigure"):
        sys.stdout.reconfigure(encoding="utf-8")
    sys.stdout.write(doc.to_json() + "\n")
    sys.stdout.flush()


def run_query(query: str, client: BaseRateClient | None = None) -> ResultDocument:
    """Run the whole pipeline for one query and return its document.

    Never raises: every failure becomes an error-shaped document.
    """
    try:
        request = parse_query(query)
    except ConversionError as exc:
        _logger.error("Parse Error: %s", exc)
        return render_error(exc)

    try:
        conv = convert_currency(request, client or FrankfurterClient())
    except ConversionError as exc:
        _logger.error("Conversion failed: %s", exc)
        return render_error(exc, request)
    except Exception as exc:  # noqa: BLE001 - любая ошибка → generic JSON
        _logger.exception("Conversion failed: %s", exc)
        return render_error(GenericConversionError(str(exc)), request)
    return render_success(conv)


def main(argv: list[str] | None = None, client: BaseRateClient | None = None) -> int:
    """CLI entrypoint used by the console script and main.py.

    Args:
        argv: Optional explicit argv (without program name). If None, uses sys.argv[1:].
        client: Optional rate client override.
    Returns:
        1 when no parameters were given (nothing on stdout), otherwise 0.
    """
    configure_logging()
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print(UsageError(), file=sys.stderr)
        return 1
    _emit(run_query(" ".join(args), client))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
