"""Free-text query parsing.

Accepted shape: ``<amount> <FROM> [in] <TO>``, e.g. ``100 usd chf`` or
``25.5 cad in aud``. The whole (trimmed) input must match.
"""

from __future__ import annotations

import math
import re

from .exceptions import ParseError
from .models import ConversionRequest
from .utils import normalize_code

USAGE_HINT = (
    "Invalid format. Use: cc [amount] [from_currency] [to_currency] "
    "or cc [amount] [from_currency] in [to_currency]"
)

_QUERY_RE = re.compile(
    r"([0-9]+(?:\.[0-9]+)?)\s+([a-zA-Z]{3,4})(?:\s+in)?\s+([a-zA-Z]{3,4})"
)


def parse_query(raw: str) -> ConversionRequest:
    """Parse a query into a ConversionRequest.

    Raises:
        ParseError: when the input does not match the supported shape
    """
    match = _QUERY_RE.fullmatch((raw or "").strip())
    if match is None:
        raise ParseError(USAGE_HINT)
    amount_s, frm, to = match.groups()
    try:
        amount = float(amount_s)
    except ValueError as exc:
        raise ParseError("Invalid amount") from exc
    if not math.isfinite(amount):
        raise ParseError("Invalid amount")
    return ConversionRequest(
        amount=amount,
        from_currency=normalize_code(frm),
        to_currency=normalize_code(to),
    )
