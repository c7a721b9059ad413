"""API views for contact enquiries."""

from __future__ import annotations

from drf_spectacular.utils import extend_schema  # type: ignore
from rest_framework import status  # type: ignore
from rest_framework.response import Response  # type: ignore
from rest_framework.views import APIView  # type: ignore

from apps.bookings.serializers import first_errors

from .serializers import EnquirySerializer
from .services import send_enquiry

SUBMIT_ERROR = "There was an error submitting your message. Please try again."


class EnquiryView(APIView):
    @extend_schema(request=EnquirySerializer)
    def post(self, request, *args, **kwargs):
        serializer = EnquirySerializer(data=request.data)
        if not serializer.is_valid():
            return Response({"errors": first_errors(serializer.errors)}, status=status.HTTP_400_BAD_REQUEST)

        if not send_enquiry(serializer.validated_data):
            return Response({"error": SUBMIT_ERROR}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response({"status": "received"}, status=status.HTTP_201_CREATED)
