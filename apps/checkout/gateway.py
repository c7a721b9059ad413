"""
Yoco Payment Gateway Integration

Creates hosted checkout sessions using the server-held secret key. Only
the redirect URL and a few identifying fields are handed back to the
browser.
"""

from __future__ import annotations

from typing import Any

import requests
import structlog
from django.conf import settings

from .constants import REDIRECT_PATHS

logger = structlog.get_logger(__name__)

# Fields of the Yoco checkout object the front-end is allowed to see
RESPONSE_FIELDS = ("id", "redirectUrl", "amount", "currency", "status")

DEFAULT_ERROR = "Failed to create checkout"


class YocoError(Exception):
    """Base error for Yoco checkout failures."""

    status_code = 500

    def __init__(self, message: str = DEFAULT_ERROR, *, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class YocoConfigurationError(YocoError):
    """The server has no secret key to talk to Yoco with."""


class YocoUpstreamError(YocoError):
    """Yoco answered with a non-2xx status; the body is relayed as is."""

    def __init__(self, status_code: int, body: str = "", content_type: str | None = None):
        super().__init__(f"Yoco responded with HTTP {status_code}", status_code=status_code)
        self.body = body or DEFAULT_ERROR
        self.content_type = content_type or "text/plain"


class YocoResponseError(YocoError):
    """Yoco answered 2xx but the body is unusable."""


def get_secret_key() -> str:
    return getattr(settings, "YOCO_SECRET_KEY", "") or ""


def is_configured() -> bool:
    return bool(get_secret_key())


def build_redirect_urls() -> dict[str, str]:
    """Absolute cancel/success/failure URLs on the public site."""
    site_url = settings.SITE_URL.rstrip("/")
    return {key: f"{site_url}{path}" for key, path in REDIRECT_PATHS.items()}


def build_metadata(
    *,
    tour_id: Any = None,
    tour_name: Any = None,
    guests: Any = None,
    customer_name: Any = None,
    customer_email: Any = None,
    customer_phone: Any = None,
    selected_date: Any = None,
) -> dict[str, Any]:
    """Booking details attached to the checkout, visible in the Yoco dashboard."""
    metadata = {
        "tourId": tour_id,
        "tourName": tour_name,
        "guests": guests,
        "customerName": customer_name,
        "customerEmail": customer_email,
        "customerPhone": customer_phone,
    }
    if selected_date is not None:
        metadata["selectedDate"] = selected_date
    metadata["source"] = settings.CHECKOUT_SOURCE
    return metadata


def create_checkout(amount: int, currency: str, metadata: dict[str, Any] | None = None) -> dict[str, Any]:
    """
    Create a Yoco checkout session.

    Args:
        amount: Amount in cents
        currency: ISO currency code (ZAR)
        metadata: Booking details, see build_metadata()

    Returns:
        dict: id, redirectUrl, amount, currency and status of the checkout

    Raises:
        YocoConfigurationError: no secret key configured, nothing was sent
        YocoUpstreamError: Yoco returned a non-2xx status
        YocoResponseError: Yoco returned 2xx without a usable body
        YocoError: the request did not reach Yoco
    """
    if not is_configured():
        logger.error("checkout.not_configured")
        raise YocoConfigurationError("YOCO_SECRET_KEY not configured on server")
    secret_key = get_secret_key()

    payload = {
        "amount": amount,
        "currency": currency,
        **build_redirect_urls(),
        "metadata": metadata or {},
    }
    headers = {
        "Authorization": f"Bearer {secret_key}",
        "Content-Type": "application/json",
    }

    log = logger.bind(amount=amount, currency=currency, tour_id=payload["metadata"].get("tourId"))
    log.info("checkout.requested")

    try:
        response = requests.post(
            settings.YOCO_API_URL,
            json=payload,
            headers=headers,
            timeout=settings.YOCO_TIMEOUT,
        )
    except requests.exceptions.RequestException as e:
        log.error("checkout.network_error", error=str(e))
        raise YocoError(DEFAULT_ERROR) from e

    if not 200 <= response.status_code < 300:
        log.warning("checkout.upstream_error", status=response.status_code, body=response.text[:500])
        raise YocoUpstreamError(
            response.status_code,
            response.text,
            response.headers.get("Content-Type"),
        )

    try:
        checkout = response.json()
    except ValueError as e:
        log.error("checkout.invalid_json", error=str(e))
        raise YocoResponseError(DEFAULT_ERROR) from e

    if not isinstance(checkout, dict) or not checkout.get("redirectUrl"):
        log.error("checkout.missing_redirect_url")
        raise YocoResponseError("Missing redirectUrl from Yoco response")

    result = {field: checkout.get(field) for field in RESPONSE_FIELDS}
    log.info("checkout.created", checkout_id=result["id"], status=result["status"])
    return result
