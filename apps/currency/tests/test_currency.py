"""Tests for exchange rate lookup, conversion and formatting."""

from __future__ import annotations

from decimal import Decimal
from unittest.mock import MagicMock, patch

import requests
from django.core.cache import cache
from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from rest_framework import status

from apps.currency import services

RATES_GET = "apps.currency.services.requests.get"
RATES_API = "https://api.exchangerate.host/latest"


def rates_response(rate):
    response = MagicMock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"base": "USD", "rates": {"ZAR": rate}}
    return response


class ExchangeRateTests(SimpleTestCase):
    def setUp(self) -> None:
        cache.clear()
        self.addCleanup(cache.clear)

    @patch(RATES_GET)
    def test_default_rate_without_rates_api(self, mock_get) -> None:
        rate = services.get_exchange_rate()

        self.assertEqual(rate.rate, Decimal("18.0"))
        self.assertEqual(rate.source, services.SOURCE_FALLBACK)
        self.assertIsNone(rate.error)
        mock_get.assert_not_called()

    @override_settings(FX_RATE_API_URL=RATES_API, FX_RATE_API_KEY="key-123")
    @patch(RATES_GET)
    def test_live_rate_is_fetched_and_cached(self, mock_get) -> None:
        mock_get.return_value = rates_response(18.65)

        first = services.get_exchange_rate()
        second = services.get_exchange_rate()

        self.assertEqual(first.rate, Decimal("18.65"))
        self.assertEqual(first.source, services.SOURCE_LIVE)
        self.assertEqual(second.rate, Decimal("18.65"))
        self.assertEqual(second.source, services.SOURCE_CACHE)
        mock_get.assert_called_once()
        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["params"], {"base": "USD", "symbols": "ZAR", "access_key": "key-123"})

    @override_settings(FX_RATE_API_URL=RATES_API)
    @patch(RATES_GET, side_effect=requests.exceptions.ConnectionError("offline"))
    def test_failed_fetch_falls_back_and_reports_error(self, mock_get) -> None:
        rate = services.get_exchange_rate()

        self.assertEqual(rate.rate, Decimal("18.0"))
        self.assertEqual(rate.source, services.SOURCE_FALLBACK)
        self.assertEqual(rate.error, services.FALLBACK_ERROR)
        self.assertIsNone(cache.get(services.CACHE_KEY))

    @override_settings(FX_RATE_API_URL=RATES_API)
    @patch(RATES_GET)
    def test_malformed_rates_payload_falls_back(self, mock_get) -> None:
        response = MagicMock()
        response.json.return_value = {"success": False, "error": {"code": 101}}
        mock_get.return_value = response

        rate = services.get_exchange_rate()

        self.assertEqual(rate.source, services.SOURCE_FALLBACK)
        self.assertEqual(rate.error, services.FALLBACK_ERROR)

    @override_settings(FX_RATE_API_URL=RATES_API)
    @patch(RATES_GET)
    def test_non_positive_rate_falls_back(self, mock_get) -> None:
        mock_get.return_value = rates_response(0)

        self.assertEqual(services.get_exchange_rate().source, services.SOURCE_FALLBACK)


class FormattingTests(SimpleTestCase):
    def test_zar_uses_south_african_grouping(self) -> None:
        self.assertEqual(services.format_price(1250), "R\u00a01\u00a0250,00")
        self.assertEqual(services.format_price(Decimal("999.5")), "R\u00a0999,50")

    def test_usd_is_converted_with_rate(self) -> None:
        self.assertEqual(services.format_price(1250, "USD", Decimal("18.0")), "$69.44")
        self.assertEqual(services.format_price(36000, "USD", Decimal("18.0")), "$2,000.00")

    def test_usd_without_rate_shows_zar(self) -> None:
        self.assertEqual(services.format_price(1250, "USD", None), "R\u00a01\u00a0250,00")

    def test_display_price_free_and_labels(self) -> None:
        self.assertEqual(services.display_price(0), "Free")
        self.assertEqual(services.display_price("0"), "Free")
        self.assertEqual(services.display_price("Free"), "Free")
        self.assertEqual(services.display_price("Custom Price"), "Custom Price")
        self.assertEqual(services.display_price(""), "Price on request")
        self.assertEqual(services.display_price(None), "Price on request")

    def test_display_price_numeric_string(self) -> None:
        self.assertEqual(services.display_price("850"), "R\u00a0850,00")

    def test_display_price_too_large_to_format_is_shown_as_given(self) -> None:
        self.assertEqual(services.display_price("9" * 400), "9" * 400)

    def test_normalize_currency(self) -> None:
        self.assertEqual(services.normalize_currency(" usd "), "USD")
        self.assertEqual(services.normalize_currency(None), "ZAR")
        with self.assertRaises(ValueError):
            services.normalize_currency("EUR")


class CurrencyAPITests(SimpleTestCase):
    def setUp(self) -> None:
        cache.clear()
        self.addCleanup(cache.clear)

    def test_rate_endpoint(self) -> None:
        response = self.client.get(reverse("currency-rate"))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(
            response.json(),
            {"base": "USD", "quote": "ZAR", "rate": 18.0, "source": "fallback", "error": None},
        )

    def test_price_endpoint_in_usd(self) -> None:
        response = self.client.get(reverse("currency-price"), {"amount": "1250", "currency": "usd"})

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"amount": "1250", "currency": "USD", "display": "$69.44"})

    def test_price_endpoint_defaults_to_zar(self) -> None:
        response = self.client.get(reverse("currency-price"), {"amount": "1250"})
        self.assertEqual(response.json()["display"], "R\u00a01\u00a0250,00")

    def test_price_endpoint_rejects_unknown_currency(self) -> None:
        response = self.client.get(reverse("currency-price"), {"amount": "1250", "currency": "EUR"})

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.json()["currency"], ["Unsupported currency. Choose one of: ZAR, USD."])
