"""Domain models for Sherlock Currency.

All entities are transient: one request, one quote, one result document
per process run.
"""

from __future__ import annotations

import json
import math
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ConversionRequest:
    """Parsed query: amount plus upper-cased source and target codes."""

    amount: float
    from_currency: str
    to_currency: str


@dataclass(frozen=True)
class RateQuote:
    rate: float
    as_of_date: str


@dataclass(frozen=True)
class RateTable:
    """Latest-rates payload returned by the rate service."""

    base: str
    date: str
    rates: dict[str, float]

    @classmethod
    def from_payload(cls, data: Any) -> "RateTable":
        """Validate a decoded JSON body.

        Raises:
            ValueError: when a field is missing or has the wrong type
        """
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        base = data.get("base")
        date = data.get("date")
        raw_rates = data.get("rates")
        if not isinstance(base, str):
            raise ValueError("missing field `base`")
        if not isinstance(date, str):
            raise ValueError("missing field `date`")
        if not isinstance(raw_rates, dict):
            raise ValueError("missing field `rates`")
        rates: dict[str, float] = {}
        for code, value in raw_rates.items():
            # bool is an int subclass and never a rate
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"rate for '{code}' is not a number")
            try:
                rate = float(value)
            except OverflowError:
                raise ValueError(f"rate for '{code}' is not finite") from None
            if not math.isfinite(rate):
                raise ValueError(f"rate for '{code}' is not finite")
            rates[str(code).upper()] = rate
        return cls(base=base, date=date, rates=rates)

    def rate_for(self, code: str) -> float | None:
        return self.rates.get((code or "").upper())


@dataclass(frozen=True)
class Conversion:
    """Outcome of applying a quote to a request."""

    request: ConversionRequest
    quote: RateQuote
    converted_amount: float

    @property
    def inverse_rate(self) -> float:
        return 1.0 / self.quote.rate


@dataclass(frozen=True)
class ApplicationAction:
    """Launcher action descriptor (only clipboard copy is produced)."""

    method: str
    exit: bool
    name: str | None = None
    exec: str | None = None
    icon: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "exec": self.exec,
            "icon": self.icon,
            "method": self.method,
            "exit": self.exit,
        }


@dataclass(frozen=True)
class ResultDocument:
    """The single JSON document emitted per run."""

    title: str
    content: str
    next_content: str = ""
    actions: tuple[ApplicationAction, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "next_content": self.next_content,
            "actions": [a.to_dict() for a in self.actions],
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))
