"""Serializers for the booking domain."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from django.utils.dateparse import parse_date, parse_datetime  # type: ignore
from rest_framework import serializers  # type: ignore

from apps.currency.services import normalize_currency

from .domain.pricing import MAX_GUESTS, MAX_UNIT_PRICE, parse_unit_price

_WHITESPACE = re.compile(r"\s")
_LOOSE_EMAIL = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_STRICT_EMAIL = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

GUESTS_ERROR = "Guests must be a whole number greater than or equal to 1"
PRICE_ERROR = "Tour price is out of range"


def parse_guests(value) -> int | None:
    """Whole number of guests between 1 and MAX_GUESTS, or None."""
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if (not number.is_finite() or number < 1 or number > MAX_GUESTS
            or number != number.to_integral_value()):
        return None
    return int(number)


def price_error(price) -> str | None:
    if parse_unit_price(price) > MAX_UNIT_PRICE:
        return PRICE_ERROR
    return None


def is_date(value: str) -> bool:
    """ISO date or datetime, as the date picker sends it."""
    try:
        return parse_datetime(value) is not None or parse_date(value) is not None
    except ValueError:
        return False


def email_error(value: str, *, format_message: str, domain_message: str | None = None) -> str | None:
    """Validation message for an e-mail address, None when it is acceptable."""
    email = (value or "").strip()
    if not email:
        return "Email address is required"
    if _WHITESPACE.search(email):
        return "Email address cannot contain spaces"
    if not _LOOSE_EMAIL.match(email):
        return format_message
    if not _STRICT_EMAIL.match(email):
        return domain_message or format_message
    return None


def first_errors(errors) -> dict[str, str]:
    """Collapse DRF's {field: [messages]} into {field: first message}."""
    flat = {}
    for field_name, messages in errors.items():
        if isinstance(messages, (list, tuple)) and messages:
            flat[field_name] = str(messages[0])
        else:
            flat[field_name] = str(messages)
    return flat


class BookingRequestSerializer(serializers.Serializer):
    """
    Booking form as the tour modal submits it.

    Every field is checked in validate() so the customer sees all
    problems at once, each with a single message.
    """

    tourId = serializers.JSONField(required=False, allow_null=True)
    tourName = serializers.CharField(required=False, allow_blank=True, default="")
    tourPrice = serializers.JSONField(required=False, allow_null=True)
    guests = serializers.JSONField(required=False, default=1)
    selectedDate = serializers.CharField(required=False, allow_blank=True, allow_null=True)
    name = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    email = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    phone = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    countryCode = serializers.CharField(required=False, allow_blank=True, default="+27")

    def validate(self, attrs):  # type: ignore
        errors = {}

        if not attrs["name"].strip():
            errors["name"] = "Full name is required"

        message = email_error(
            attrs["email"],
            format_message="Please enter a valid email address (e.g., name@example.com)",
            domain_message="Please enter a valid email address with proper domain format",
        )
        if message:
            errors["email"] = message

        if not attrs["phone"].strip():
            errors["phone"] = "Phone number is required"

        selected_date = (attrs.get("selectedDate") or "").strip()
        if not selected_date:
            errors["selectedDate"] = "Please select a date"
        elif not is_date(selected_date):
            errors["selectedDate"] = "Please select a valid date"

        guests = parse_guests(attrs.get("guests"))
        if guests is None:
            errors["guests"] = GUESTS_ERROR

        message = price_error(attrs.get("tourPrice"))
        if message:
            errors["tourPrice"] = message

        if errors:
            raise serializers.ValidationError(errors)

        attrs["guests"] = guests
        attrs["name"] = attrs["name"].strip()
        attrs["email"] = attrs["email"].strip()
        attrs["phone"] = attrs["phone"].strip()
        attrs["selectedDate"] = selected_date
        attrs["customerPhone"] = f"{attrs['countryCode'].strip()} {attrs['phone']}".strip()
        return attrs


class QuoteRequestSerializer(serializers.Serializer):
    tourPrice = serializers.JSONField(required=False, allow_null=True)
    guests = serializers.JSONField(required=False, default=1)
    currency = serializers.CharField(required=False, default="ZAR")

    def validate_guests(self, value):  # type: ignore
        guests = parse_guests(value)
        if guests is None:
            raise serializers.ValidationError(GUESTS_ERROR)
        return guests

    def validate_tourPrice(self, value):  # type: ignore
        message = price_error(value)
        if message:
            raise serializers.ValidationError(message)
        return value

    def validate_currency(self, value: str) -> str:
        try:
            return normalize_currency(value)
        except ValueError as e:
            raise serializers.ValidationError(str(e))


class QuoteSerializer(serializers.Serializer):
    unitPrice = serializers.FloatField()
    guests = serializers.IntegerField()
    total = serializers.FloatField()
    amountCents = serializers.IntegerField()
    currency = serializers.CharField()
    isFreeOrCustom = serializers.BooleanField()
    display = serializers.CharField()


class BookingCheckoutResponseSerializer(serializers.Serializer):
    status = serializers.CharField()
    redirectUrl = serializers.URLField()
    checkoutId = serializers.CharField()
    amount = serializers.IntegerField()
    currency = serializers.CharField()
