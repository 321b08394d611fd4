"""End-to-end CLI scenarios: one JSON line on stdout, diagnostics on stderr."""

from __future__ import annotations

import io
import json
import sys
from unittest.mock import patch

import pytest

from conftest import make_response
from sherlock_currency.cli import interface
from sherlock_currency.cli.formatter import FAILED_TITLE, INVALID_INPUT_TITLE
from sherlock_currency.core.exceptions import NetworkError

GET = "sherlock_currency.rate_service.api_clients.requests.get"


def _single_document(out: str) -> dict:
    lines = out.splitlines()
    assert len(lines) == 1
    return json.loads(lines[0])


class TestMain:
    def test_no_arguments_is_a_usage_error(self, capsys):
        code = interface.main([])

        captured = capsys.readouterr()
        assert code == 1
        assert captured.out == ""
        assert "No conversion parameters provided" in captured.err

    def test_success(self, capsys, stub_client):
        client = stub_client({"CHF": 0.91}, date="2024-01-15")

        code = interface.main(["100", "usd", "chf"], client=client)

        doc = _single_document(capsys.readouterr().out)
        assert code == 0
        assert doc["title"] == "100.00 USD → 91.00 CHF"
        assert doc["next_content"] == doc["content"]
        assert len(doc["actions"]) == 1
        assert doc["actions"][0]["method"] == "copy"

    def test_arguments_are_joined(self, capsys, stub_client):
        client = stub_client({"GBP": 0.86})

        interface.main(["50 eur", "in", "gbp"], client=client)

        assert client.calls == [("EUR", "GBP")]
        assert _single_document(capsys.readouterr().out)["title"] == "50.00 EUR → 43.00 GBP"

    def test_same_currency(self, capsys, stub_client):
        client = stub_client({})

        interface.main(["100", "usd", "usd"], client=client)

        doc = _single_document(capsys.readouterr().out)
        assert client.calls == []
        assert doc["title"] == "100.00 USD → 100.00 USD"
        assert "Date: Today" in doc["content"]

    def test_parse_error(self, capsys, stub_client):
        client = stub_client({})

        code = interface.main(["not", "a", "valid", "query"], client=client)

        captured = capsys.readouterr()
        doc = _single_document(captured.out)
        assert code == 0
        assert client.calls == []
        assert doc["title"] == INVALID_INPUT_TITLE
        assert "Usage Examples" in doc["content"]
        assert doc["next_content"] == ""
        assert doc["actions"] == []
        assert "Parse Error: Invalid format." in captured.err

    def test_unsupported_currency(self, capsys, stub_client):
        code = interface.main(["1000", "jpy", "xyz"], client=stub_client({}, base="JPY"))

        captured = capsys.readouterr()
        doc = _single_document(captured.out)
        assert code == 0
        assert doc["title"] == FAILED_TITLE
        assert "'JPY' or 'XYZ' is not supported" in doc["content"]
        assert doc["actions"] == []
        assert "Conversion failed: Currency 'XYZ' not supported or not found" in captured.err

    def test_network_error(self, capsys, stub_client):
        client = stub_client(error=NetworkError("HTTP Error: 500", status_code=500))

        code = interface.main(["50", "eur", "in", "gbp"], client=client)

        doc = _single_document(capsys.readouterr().out)
        assert code == 0
        assert doc["title"] == FAILED_TITLE
        assert "Network Error" in doc["content"]
        assert "Error: HTTP Error: 500" in doc["content"]
        assert doc["actions"] == []

    def test_unexpected_exception_becomes_generic_error(self, capsys, stub_client):
        client = stub_client(error=RuntimeError("boom"))

        code = interface.main(["1", "usd", "eur"], client=client)

        doc = _single_document(capsys.readouterr().out)
        assert code == 0
        assert doc["title"] == FAILED_TITLE
        assert "An error occurred during conversion:\nboom" in doc["content"]

    def test_zero_rate_becomes_generic_error(self, capsys, stub_client):
        interface.main(["1", "usd", "eur"], client=stub_client({"EUR": 0.0}))

        doc = _single_document(capsys.readouterr().out)
        assert "Conversion Error" in doc["content"]
        assert "Invalid exchange rate" in doc["content"]


class TestDefaultClient:
    @patch(GET)
    def test_http_500_through_real_client(self, mock_get, capsys):
        mock_get.return_value = make_response(500, {"message": "server error"})

        code = interface.main(["50", "eur", "in", "gbp"])

        doc = _single_document(capsys.readouterr().out)
        assert code == 0
        assert doc["actions"] == []
        assert "Error: HTTP Error: 500" in doc["content"]
        args, kwargs = mock_get.call_args
        assert args == ("https://api.frankfurter.dev/v1/latest",)
        assert kwargs["params"] == {"base": "EUR", "symbols": "GBP"}

    @patch(GET)
    def test_success_through_real_client(self, mock_get, capsys):
        mock_get.return_value = make_response(
            200, {"amount": 1.0, "base": "USD", "date": "2024-01-15", "rates": {"CHF": 0.91}}
        )

        interface.main(["100", "usd", "chf"])

        doc = _single_document(capsys.readouterr().out)
        assert doc["title"] == "100.00 USD → 91.00 CHF"

    @pytest.mark.parametrize("query", ["", "   "])
    def test_blank_single_argument_is_a_parse_error(self, capsys, query):
        code = interface.main([query])

        doc = _single_document(capsys.readouterr().out)
        assert code == 0
        assert doc["title"] == INVALID_INPUT_TITLE


class TestOutputEncoding:
    def test_document_is_utf8_under_latin1_stdout(self, monkeypatch, stub_client):
        raw = io.BytesIO()
        stdout = io.TextIOWrapper(raw, encoding="latin-1")
        monkeypatch.setattr(sys, "stdout", stdout)

        code = interface.main(["100", "usd", "chf"], client=stub_client({"CHF": 0.91}))

        stdout.flush()
        doc = _single_document(raw.getvalue().decode("utf-8"))
        assert code == 0
        assert doc["title"] == "100.00 USD → 91.00 CHF"

    @patch(GET)
    def test_oversized_rate_uses_network_template(self, mock_get, capsys):
        mock_get.return_value = make_response(
            200, {"base": "EUR", "date": "2024-01-15", "rates": {"GBP": 10**400}}
        )

        interface.main(["1", "eur", "gbp"])

        doc = _single_document(capsys.readouterr().out)
        assert "<b><i>Network Error</i></b>" in doc["content"]
        assert "is not finite" in doc["content"]
