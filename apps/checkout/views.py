"""API views for the Yoco checkout proxy."""

from __future__ import annotations

import structlog
from django.http import HttpResponse  # type: ignore
from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.decorators import api_view  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from . import gateway
from .constants import PAYMENT_STATUS_PAGES, PAYMENT_SUCCESS
from .serializers import CheckoutRequestSerializer, CheckoutResponseSerializer, PaymentStatusSerializer

logger = structlog.get_logger(__name__)


def gateway_error_response(exc: gateway.YocoError, extra: dict | None = None):
    """Translate a gateway error into the response the front-end expects.

    Upstream errors are relayed with Yoco's own status and body; every
    other failure is a JSON error with status 500.
    """
    if isinstance(exc, gateway.YocoUpstreamError):
        if extra is None:
            return HttpResponse(exc.body, status=exc.status_code, content_type=exc.content_type)
        return Response({**extra, "error": exc.body}, status=exc.status_code)
    return Response({**(extra or {}), "error": exc.message}, status=exc.status_code)


class YocoCheckoutView(APIView):
    """Creates a Yoco checkout for the amount the booking modal computed."""

    @extend_schema(request=CheckoutRequestSerializer, responses={200: CheckoutResponseSerializer})
    def post(self, request, *args, **kwargs):
        data = request.data if isinstance(request.data, dict) else {}

        if not data.get("amount") or not data.get("currency"):
            logger.warning("checkout.missing_fields", fields=sorted(data))
            return Response({"error": "Missing amount or currency"}, status=status.HTTP_400_BAD_REQUEST)

        serializer = CheckoutRequestSerializer(data=data)
        if not serializer.is_valid():
            logger.warning("checkout.invalid_request", errors=serializer.errors)
            return Response(
                {"error": "Invalid checkout request", "details": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        payload = serializer.validated_data

        metadata = gateway.build_metadata(
            tour_id=payload.get("tourId"),
            tour_name=payload.get("tourName"),
            guests=payload.get("guests"),
            customer_name=payload.get("customerName"),
            customer_email=payload.get("customerEmail"),
            customer_phone=payload.get("customerPhone"),
            selected_date=payload.get("selectedDate"),
        )

        try:
            checkout = gateway.create_checkout(payload["amount"], payload["currency"], metadata)
        except gateway.YocoError as e:
            return gateway_error_response(e)
        except Exception:
            logger.exception("checkout.unexpected_error")
            return Response({"error": gateway.DEFAULT_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(checkout, status=status.HTTP_200_OK)


@extend_schema(responses={200: PaymentStatusSerializer})
@api_view(["GET"])
def payment_status(request, kind: str):
    """Content of the page shown after Yoco redirects the customer back."""
    if kind not in PAYMENT_STATUS_PAGES:
        logger.info("payment_status.unknown_kind", kind=kind)
        kind = PAYMENT_SUCCESS
    return Response({"kind": kind, **PAYMENT_STATUS_PAGES[kind]})
