"""API views for the booking domain."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.checkout.views import gateway_error_response

from . import services
from .domain.entities import CheckoutStatus
from .domain.pricing import BOOKING_CURRENCY
from .serializers import (
    BookingCheckoutResponseSerializer,
    BookingRequestSerializer,
    QuoteRequestSerializer,
    QuoteSerializer,
    first_errors,
)


class BookingQuoteView(APIView):
    """Price of a tour for a number of guests."""

    @extend_schema(request=QuoteRequestSerializer, responses={200: QuoteSerializer})
    def post(self, request, *args, **kwargs):
        serializer = QuoteRequestSerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"errors": first_errors(serializer.errors)}, status=status.HTTP_400_BAD_REQUEST)

        data = serializer.validated_data
        quote = services.build_quote(data.get("tourPrice"), data["guests"])
        return Response(services.describe_quote(quote, data["currency"]))


class BookingCheckoutView(APIView):
    """Validates the booking form and hands the customer to the payment gateway."""

    @extend_schema(request=BookingRequestSerializer, responses={200: BookingCheckoutResponseSerializer})
    def post(self, request, *args, **kwargs):
        data = request.data if isinstance(request.data, dict) else {}
        result = services.start_checkout(data)
        session = result.session

        if session.status is CheckoutStatus.IDLE:
            return Response(
                {"status": session.status.value, "errors": session.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )

        if session.status is CheckoutStatus.FAILED:
            return gateway_error_response(result.error, extra={"status": session.status.value})

        return Response(
            {
                "status": session.status.value,
                "redirectUrl": session.redirect_url,
                "checkoutId": session.checkout_id,
                "amount": session.quote.amount_cents,
                "currency": BOOKING_CURRENCY,
            },
            status=status.HTTP_200_OK,
        )
