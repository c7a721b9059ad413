"""Integration tests for the contact form endpoint."""

from __future__ import annotations

from unittest.mock import patch

from django.core import mail
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase


class ContactAPITests(APITestCase):
    def setUp(self) -> None:
        self.url = reverse("contact")
        self.payload = {
            "name": "Aisha Patel",
            "email": "aisha@example.com",
            "phone": "+44 7700 900123",
            "tour": "Cape Peninsula Tour",
            "message": "Do you offer hotel pick-up in Sea Point?",
        }

    def test_valid_enquiry_is_emailed(self) -> None:
        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.content)
        self.assertEqual(response.json(), {"status": "received"})
        self.assertEqual(len(mail.outbox), 1)
        message = mail.outbox[0]
        self.assertEqual(message.to, ["bookings@admtravelssa.com"])
        self.assertEqual(message.reply_to, ["aisha@example.com"])
        self.assertIn("Cape Peninsula Tour", message.subject)
        self.assertIn("hotel pick-up", message.body)

    def test_empty_form_reports_every_field(self) -> None:
        response = self.client.post(self.url, {}, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(
            response.json()["errors"],
            {
                "name": "Name is required",
                "email": "Email address is required",
                "phone": "Phone number is required",
                "tour": "Please select a tour",
                "message": "Message is required",
            },
        )
        self.assertEqual(len(mail.outbox), 0)

    def test_short_message_and_bad_email(self) -> None:
        self.payload.update(message="Hi there", email="aisha@example")

        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(
            response.json()["errors"],
            {
                "email": "Please enter a valid email address",
                "message": "Message must be at least 10 characters",
            },
        )

    @patch("apps.enquiries.services.EmailMessage.send", side_effect=OSError("SMTP down"))
    def test_mail_failure_is_reported(self, mock_send) -> None:
        response = self.client.post(self.url, self.payload, format="json")

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(
            response.json(),
            {"error": "There was an error submitting your message. Please try again."},
        )
