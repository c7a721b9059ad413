"""Serializers for contact enquiries."""

from __future__ import annotations

from rest_framework import serializers  # type: ignore

from apps.bookings.serializers import email_error

MIN_MESSAGE_LENGTH = 10


class EnquirySerializer(serializers.Serializer):
    name = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    email = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    phone = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    tour = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)
    message = serializers.CharField(required=False, allow_blank=True, default="", trim_whitespace=False)

    def validate(self, attrs):  # type: ignore
        cleaned = {key: value.strip() for key, value in attrs.items()}
        errors = {}

        if not cleaned["name"]:
            errors["name"] = "Name is required"

        message = email_error(cleaned["email"], format_message="Please enter a valid email address")
        if message:
            errors["email"] = message

        if not cleaned["phone"]:
            errors["phone"] = "Phone number is required"

        if not cleaned["tour"]:
            errors["tour"] = "Please select a tour"

        if not cleaned["message"]:
            errors["message"] = "Message is required"
        elif len(cleaned["message"]) < MIN_MESSAGE_LENGTH:
            errors["message"] = f"Message must be at least {MIN_MESSAGE_LENGTH} characters"

        if errors:
            raise serializers.ValidationError(errors)
        return cleaned
