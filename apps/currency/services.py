"""Exchange rate lookup and price formatting."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

import requests
import structlog
from django.conf import settings
from django.core.cache import cache

from shared.domain.value_objects import SUPPORTED_CURRENCIES, Money

logger = structlog.get_logger(__name__)

CACHE_KEY = "fx_rate_cache"
DEFAULT_CURRENCY = "ZAR"
FALLBACK_ERROR = "Failed to load exchange rates. Using default conversion."

SOURCE_LIVE = "live"
SOURCE_CACHE = "cache"
SOURCE_FALLBACK = "fallback"

CENTS = Decimal("0.01")

# en-ZA groups digits with no-break spaces, and one follows the R too
NBSP = "\u00a0"

# Larger amounts do not fit the decimal context once quantized to cents
MAX_DISPLAY_AMOUNT = Decimal("1e15")


@dataclass(frozen=True)
class ExchangeRate:
    """How many ZAR one USD buys, and where the figure came from."""

    rate: Decimal
    source: str
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "base": "USD",
            "quote": "ZAR",
            "rate": float(self.rate),
            "source": self.source,
            "error": self.error,
        }


def normalize_currency(value: str | None) -> str:
    currency = (value or DEFAULT_CURRENCY).strip().upper()
    if currency not in SUPPORTED_CURRENCIES:
        raise ValueError(f"Unsupported currency. Choose one of: {', '.join(SUPPORTED_CURRENCIES)}.")
    return currency


def default_rate() -> Decimal:
    return Decimal(str(settings.FX_DEFAULT_RATE))


def fetch_live_rate() -> Decimal:
    """Ask the configured rates API for the current USD -> ZAR rate."""
    params = {"base": "USD", "symbols": "ZAR"}
    if settings.FX_RATE_API_KEY:
        params["access_key"] = settings.FX_RATE_API_KEY

    response = requests.get(settings.FX_RATE_API_URL, params=params, timeout=settings.FX_TIMEOUT)
    response.raise_for_status()
    rate = Decimal(str(response.json()["rates"]["ZAR"]))
    if not rate.is_finite() or rate <= 0:
        raise ValueError(f"Implausible exchange rate: {rate}")
    return rate


def get_exchange_rate() -> ExchangeRate:
    """
    Current USD -> ZAR rate.

    A fetched rate is cached for FX_CACHE_TIMEOUT seconds. Without a rates
    API, or when the fetch fails, the default rate is returned and nothing
    is cached so the next request tries again.
    """
    cached = cache.get(CACHE_KEY)
    if cached is not None:
        return ExchangeRate(Decimal(cached), SOURCE_CACHE)

    if not settings.FX_RATE_API_URL:
        return ExchangeRate(default_rate(), SOURCE_FALLBACK)

    try:
        rate = fetch_live_rate()
    except (requests.exceptions.RequestException, KeyError, TypeError, ValueError, InvalidOperation) as e:
        logger.warning("fx_rate.fetch_failed", error=str(e))
        return ExchangeRate(default_rate(), SOURCE_FALLBACK, FALLBACK_ERROR)

    cache.set(CACHE_KEY, str(rate), settings.FX_CACHE_TIMEOUT)
    logger.info("fx_rate.refreshed", rate=str(rate))
    return ExchangeRate(rate, SOURCE_LIVE)


def convert_from_zar(zar_amount: Decimal, currency: str, rate: Decimal) -> Money:
    if currency == "ZAR":
        return Money(zar_amount, "ZAR")
    return Money(zar_amount / rate, currency)


def format_money(money: Money) -> str:
    """R 1 250,00 for rand (en-ZA grouping, no-break spaces), $69.44 for dollars."""
    amount = money.amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    if money.currency == "ZAR":
        grouped = f"{amount:,.2f}".translate(str.maketrans({",": NBSP, ".": ","}))
        return f"R{NBSP}{grouped}"
    return f"${amount:,.2f}"


def format_price(zar_amount, currency: str = DEFAULT_CURRENCY, rate: Decimal | None = None) -> str:
    """Format a ZAR amount in the display currency."""
    zar_amount = Decimal(str(zar_amount))
    if currency == "ZAR" or not rate:
        return format_money(Money(zar_amount, "ZAR"))
    return format_money(convert_from_zar(zar_amount, currency, rate))


def display_price(price: Any, currency: str = DEFAULT_CURRENCY, rate: Decimal | None = None) -> str:
    """
    Text shown for a tour price.

    Zero or "Free" prices read "Free"; labels such as "Custom Price" are
    shown as they are; anything numeric within range is formatted.
    """
    if price in (0, "0", "Free"):
        return "Free"
    if price is None or price == "":
        return "Price on request"
    try:
        amount = Decimal(str(price).strip())
    except InvalidOperation:
        return str(price)
    if not amount.is_finite() or amount < 0 or amount >= MAX_DISPLAY_AMOUNT:
        return str(price)
    return format_price(amount, currency, rate)
