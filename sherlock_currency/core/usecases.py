"""Business use-cases for Sherlock Currency.

The CLI parses the query, calls ``convert_currency`` and formats the
outcome. Rate lookup and arithmetic live behind this function.
"""

from __future__ import annotations

from ..decorators import log_action
from ..rate_service.api_clients import BaseRateClient
from .conversion import convert
from .models import Conversion, ConversionRequest


@log_action("CONVERT")
def convert_currency(request: ConversionRequest, client: BaseRateClient) -> Conversion:
    """Fetch the FROM→TO rate and apply it to the requested amount.

    Args:
        request: Parsed query.
        client: Rate client; same-currency requests never reach the network.
    Returns:
        Conversion with quote and converted amount.
    Raises:
        NetworkError, UnsupportedCurrencyError: from the rate client.
        GenericConversionError: on a degenerate rate.
    """
    quote = client.fetch_rate(request.from_currency, request.to_currency)
    return convert(request, quote)
