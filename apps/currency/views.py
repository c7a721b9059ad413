"""API views for currency conversion."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import services
from .serializers import ExchangeRateSerializer, PriceQuerySerializer


class ExchangeRateView(APIView):
    @extend_schema(responses={200: ExchangeRateSerializer})
    def get(self, request, *args, **kwargs):
        return Response(services.get_exchange_rate().to_dict())


class PriceView(APIView):
    """Formats a ZAR price in the visitor's display currency."""

    @extend_schema(parameters=[PriceQuerySerializer])
    def get(self, request, *args, **kwargs):
        serializer = PriceQuerySerializer(data=request.query_params)
        if not serializer.is_valid():
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        amount = serializer.validated_data["amount"]
        currency = serializer.validated_data["currency"]
        rate = services.get_exchange_rate() if currency != services.DEFAULT_CURRENCY else None
        return Response(
            {
                "amount": amount,
                "currency": currency,
                "display": services.display_price(amount, currency, rate.rate if rate else None),
            }
        )
