"""Domain services for the booking checkout workflow."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from apps.checkout import gateway
from apps.currency import services as currency_services

from .domain.entities import BookingSession
from .domain.pricing import BOOKING_CURRENCY, BookingQuote
from .serializers import BookingRequestSerializer, first_errors

logger = structlog.get_logger(__name__)

PRICE_ON_REQUEST = "This tour is priced on request. Please contact us to book it."


@dataclass
class CheckoutResult:
    """Outcome of one booking attempt; error is set when the gateway failed."""

    session: BookingSession
    error: gateway.YocoError | None = None


def build_quote(price: Any, guests: int) -> BookingQuote:
    return BookingQuote.for_tour(price, guests)


def describe_quote(quote: BookingQuote, currency: str = BOOKING_CURRENCY) -> dict[str, Any]:
    """Quote as the booking modal displays it."""
    rate = None
    if currency != BOOKING_CURRENCY:
        rate = currency_services.get_exchange_rate().rate
    if quote.is_free_or_custom:
        display = currency_services.display_price(quote.price_label or 0, currency, rate)
    else:
        display = currency_services.format_price(quote.total.amount, currency, rate)
    return {
        "unitPrice": float(quote.unit_price.amount),
        "guests": quote.guests,
        "total": float(quote.total.amount),
        "amountCents": quote.amount_cents,
        "currency": BOOKING_CURRENCY,
        "isFreeOrCustom": quote.is_free_or_custom,
        "display": display,
    }


def publish_events(session: BookingSession) -> None:
    for event in session.pull_events():
        logger.info(f"booking.{event.event_type}", **event.to_dict())


def start_checkout(data: dict[str, Any]) -> CheckoutResult:
    """
    Run a booking session: validate the form, price it and create the
    gateway checkout.

    The returned session is IDLE with errors when the form was rejected,
    FAILED when the gateway refused, REDIRECT on success.
    """
    session = BookingSession(tour_id=data.get("tourId"))
    session.begin_validation()

    serializer = BookingRequestSerializer(data=data)
    if not serializer.is_valid():
        session.reject(first_errors(serializer.errors))
        logger.info("booking.rejected", tour_id=session.tour_id, fields=sorted(session.errors))
        return CheckoutResult(session)

    booking = serializer.validated_data
    quote = build_quote(booking.get("tourPrice"), booking["guests"])
    if quote.is_free_or_custom:
        session.reject({"tourPrice": PRICE_ON_REQUEST})
        logger.info("booking.price_on_request", tour_id=session.tour_id)
        return CheckoutResult(session)

    session.submit(quote)
    metadata = gateway.build_metadata(
        tour_id=booking.get("tourId"),
        tour_name=booking.get("tourName"),
        guests=booking["guests"],
        customer_name=booking["name"],
        customer_email=booking["email"],
        customer_phone=booking["customerPhone"],
        selected_date=booking["selectedDate"],
    )

    try:
        checkout = gateway.create_checkout(quote.amount_cents, BOOKING_CURRENCY, metadata)
    except gateway.YocoError as e:
        error = e
    except Exception:
        logger.exception("booking.checkout_unexpected_error", tour_id=session.tour_id)
        error = gateway.YocoError(gateway.DEFAULT_ERROR)
    else:
        session.redirect(checkout["id"], checkout["redirectUrl"])
        publish_events(session)
        return CheckoutResult(session)

    session.fail(error.message)
    publish_events(session)
    return CheckoutResult(session, error=error)
