"""Conversion engine.

Applies a quote to a request and builds the display strings for the
result card: title line, rich-text body and the clipboard copy action.
No I/O happens here.
"""

from __future__ import annotations

import math

from .exceptions import GenericConversionError
from .models import ApplicationAction, Conversion, ConversionRequest, RateQuote
from .utils import compute_value, format_amount, format_rate

COPY_ICON = "preferences-system"

_CONTENT_TEMPLATE = """<span font_desc="monospace">
─── <b><i>Currency Conversion</i></b> ───

<b>{amount} {frm}</b> = <b>{result} {to}</b>

Exchange Rate: 1 {frm} = {rate} {to}
Inverse Rate: 1 {to} = {inverse} {frm}

Date: {date}
────────────
</span>"""


def convert(request: ConversionRequest, quote: RateQuote) -> Conversion:
    """Apply ``quote`` to ``request``.

    Raises:
        GenericConversionError: if the rate is zero, negative or not finite
    """
    rate = float(quote.rate)
    if not math.isfinite(rate) or rate <= 0:
        raise GenericConversionError(f"Invalid exchange rate: {quote.rate}")
    return Conversion(
        request=request,
        quote=quote,
        converted_amount=compute_value(request.amount, rate),
    )


def format_title(conv: Conversion) -> str:
    req = conv.request
    return (
        f"{format_amount(req.amount)} {req.from_currency} → "
        f"{format_amount(conv.converted_amount)} {req.to_currency}"
    )


def format_content(conv: Conversion) -> str:
    req = conv.request
    return _CONTENT_TEMPLATE.format(
        amount=format_amount(req.amount),
        frm=req.from_currency,
        result=format_amount(conv.converted_amount),
        to=req.to_currency,
        rate=format_rate(conv.quote.rate),
        inverse=format_rate(conv.inverse_rate),
        date=conv.quote.as_of_date,
    )


def build_copy_action(conv: Conversion) -> ApplicationAction:
    """Clipboard action: short result as name, detailed summary as payload.

    The payload does not include the quote date.
    """
    req = conv.request
    result_text = f"{format_amount(conv.converted_amount)} {req.to_currency}"
    detailed = (
        f"{format_amount(req.amount)} {req.from_currency} = {result_text}\n"
        f"Exchange Rate: 1 {req.from_currency} = "
        f"{format_rate(conv.quote.rate)} {req.to_currency}"
    )
    return ApplicationAction(
        name=result_text,
        exec=detailed,
        icon=COPY_ICON,
        method="copy",
        exit=True,
    )
