"""Serializers for the currency endpoints."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from .services import normalize_currency


class PriceQuerySerializer(serializers.Serializer):
    amount = serializers.CharField(required=False, allow_blank=True, default="")
    currency = serializers.CharField(required=False, default="ZAR")

    def validate_currency(self, value: str) -> str:
        try:
            return normalize_currency(value)
        except ValueError as e:
            raise serializers.ValidationError(str(e))


class ExchangeRateSerializer(serializers.Serializer):
    base = serializers.CharField()
    quote = serializers.CharField()
    rate = serializers.FloatField()
    source = serializers.CharField()
    error = serializers.CharField(allow_null=True)
