"""Serializers for the checkout proxy."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore


class CheckoutRequestSerializer(serializers.Serializer):
    """Body of POST /api/yoco-checkout.

    Only amount and currency are checked here. Currency and the booking
    fields go to the gateway as sent, so Yoco rejects what it does not
    accept and that error is relayed.
    """

    amount = serializers.IntegerField(min_value=1, help_text="Amount in cents")
    currency = serializers.CharField(trim_whitespace=False)
    tourId = serializers.JSONField(required=False, allow_null=True)
    tourName = serializers.JSONField(required=False, allow_null=True)
    guests = serializers.JSONField(required=False, allow_null=True)
    customerName = serializers.JSONField(required=False, allow_null=True)
    customerEmail = serializers.JSONField(required=False, allow_null=True)
    customerPhone = serializers.JSONField(required=False, allow_null=True)
    selectedDate = serializers.JSONField(required=False, allow_null=True)


class CheckoutResponseSerializer(serializers.Serializer):
    id = serializers.CharField()
    redirectUrl = serializers.URLField()
    amount = serializers.IntegerField()
    currency = serializers.CharField()
    status = serializers.CharField()


class PaymentStatusSerializer(serializers.Serializer):
    kind = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField()
    actionLabel = serializers.CharField()
    actionHref = serializers.CharField()
