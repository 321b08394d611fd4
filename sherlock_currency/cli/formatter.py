"""Result document rendering for the launcher.

One template per outcome kind. Body markup (monospace span, bold/italic
tags, box-drawing rules) is consumed by the launcher's renderer and must
stay byte-for-byte stable.
"""

from __future__ import annotations

from typing import Callable

from ..core import currencies as cur
from ..core.conversion import build_copy_action, format_content, format_title
from ..core.exceptions import ConversionError, ErrorKind, UnsupportedCurrencyError
from ..core.models import Conversion, ConversionRequest, ResultDocument

INVALID_INPUT_TITLE = "Invalid Input Format"
FAILED_TITLE = "Conversion Failed"

_RULE = "────────────"


def _block(heading: str, body: str) -> str:
    return (
        '<span font_desc="monospace">\n'
        f"─── <b><i>{heading}</i></b> ───\n\n"
        f"{body}\n"
        f"{_RULE}\n"
        "</span>"
    )


def render_success(conv: Conversion) -> ResultDocument:
    content = format_content(conv)
    return ResultDocument(
        title=format_title(conv),
        content=content,
        next_content=content,
        actions=(build_copy_action(conv),),
    )


def _usage_content(err: ConversionError, request: ConversionRequest | None) -> str:
    major = ", ".join(cur.codes_by_region().get(cur.MAJOR, []))
    return _block(
        "Usage Examples",
        "• cc 100 usd chf\n"
        "• cc 50 eur in gbp\n"
        "• cc 1000 jpy usd\n"
        "• cc 25.5 cad aud\n"
        "\n"
        "Supported: 30+ major currencies including:\n"
        f"{major}, etc.\n"
        "\n"
        "Note: Cryptocurrencies not supported by this API",
    )


def _unsupported_content(
    err: ConversionError, request: ConversionRequest | None
) -> str:
    if request is not None:
        frm, to = request.from_currency, request.to_currency
    else:
        frm = to = err.code if isinstance(err, UnsupportedCurrencyError) else "?"
    groups = "\n".join(
        f"• {region}: {', '.join(codes)}"
        for region, codes in cur.codes_by_region().items()
    )
    return _block(
        "Currency Not Supported",
        f"'{frm}' or '{to}' is not supported by Frankfurter API.\n"
        "\n"
        "Supported currencies include:\n"
        f"{groups}\n"
        "\n"
        "Note: Cryptocurrencies are not supported",
    )


def _network_content(err: ConversionError, request: ConversionRequest | None) -> str:
    return _block(
        "Network Error",
        "Failed to connect to Frankfurter API.\n"
        "Please check your internet connection and try again.\n"
        "\n"
        f"Error: {err}",
    )


def _generic_content(err: ConversionError, request: ConversionRequest | None) -> str:
    return _block(
        "Conversion Error",
        "An error occurred during conversion:\n"
        f"{err}\n"
        "\n"
        "Please verify currency codes and try again.",
    )


_ERROR_TEMPLATES: dict[
    ErrorKind,
    tuple[str, Callable[[ConversionError, ConversionRequest | None], str]],
] = {
    ErrorKind.PARSE: (INVALID_INPUT_TITLE, _usage_content),
    ErrorKind.UNSUPPORTED_CURRENCY: (FAILED_TITLE, _unsupported_content),
    ErrorKind.NETWORK: (FAILED_TITLE, _network_content),
    ErrorKind.GENERIC: (FAILED_TITLE, _generic_content),
}


def render_error(
    err: ConversionError, request: ConversionRequest | None = None
) -> ResultDocument:
    """Render an error outcome; ``request`` names both codes when known.

    Raises:
        ValueError: for usage errors, which never produce a document
    """
    try:
        title, content_fn = _ERROR_TEMPLATES[err.kind]
    except KeyError:
        raise ValueError(f"no result document for {err.kind.value} errors") from None
    return ResultDocument(title=title, content=content_fn(err, request))


def render(
    outcome: Conversion | ConversionError, request: ConversionRequest | None = None
) -> ResultDocument:
    if isinstance(outcome, Conversion):
        return render_success(outcome)
    return render_error(outcome, request)
