from __future__ import annotations


class FiatCurrency:
    """Fiat currency known to be served by the rate service.

    Public attributes:
      - code: str (3–4 uppercase letters)
      - region: str (grouping used in help blocks)
    """

    code: str
    region: str

    def __init__(self, code: str, region: str) -> None:
        c = (code or "").strip().upper()
        if not (3 <= len(c) <= 4) or not c.isalpha():
            raise ValueError("code must be 3–4 letters")
        self.code = c
        self.region = (region or "").strip() or "Others"


MAJOR = "Major"
EUROPEAN = "European"
ASIAN = "Asian"
OTHERS = "Others"

# Known-good sample; the rate service itself is the authority.
_REGISTRY: dict[str, FiatCurrency] = {
    c.code: c
    for c in (
        FiatCurrency("USD", MAJOR),
        FiatCurrency("EUR", MAJOR),
        FiatCurrency("GBP", MAJOR),
        FiatCurrency("JPY", MAJOR),
        FiatCurrency("CHF", MAJOR),
        FiatCurrency("CAD", MAJOR),
        FiatCurrency("AUD", MAJOR),
        FiatCurrency("SEK", EUROPEAN),
        FiatCurrency("NOK", EUROPEAN),
        FiatCurrency("DKK", EUROPEAN),
        FiatCurrency("PLN", EUROPEAN),
        FiatCurrency("CZK", EUROPEAN),
        FiatCurrency("HUF", EUROPEAN),
        FiatCurrency("CNY", ASIAN),
        FiatCurrency("HKD", ASIAN),
        FiatCurrency("SGD", ASIAN),
        FiatCurrency("KRW", ASIAN),
        FiatCurrency("INR", ASIAN),
        FiatCurrency("THB", ASIAN),
        FiatCurrency("BRL", OTHERS),
        FiatCurrency("MXN", OTHERS),
        FiatCurrency("ZAR", OTHERS),
        FiatCurrency("TRY", OTHERS),
        FiatCurrency("RUB", OTHERS),
    )
}


def codes_by_region() -> dict[str, list[str]]:
    """Group registry codes by region, preserving registry order."""
    groups: dict[str, list[str]] = {}
    for cur in _REGISTRY.values():
        groups.setdefault(cur.region, []).append(cur.code)
    return groups
