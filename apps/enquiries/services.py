"""Delivery of contact enquiries to the bookings inbox."""

from __future__ import annotations

import structlog
from django.conf import settings  # type: ignore
from django.core.mail import EmailMessage  # type: ignore

logger = structlog.get_logger(__name__)


def send_enquiry(enquiry: dict[str, str]) -> bool:
    """
    E-mail a validated enquiry to CONTACT_EMAIL.

    Replies go straight to the customer through Reply-To.

    Returns:
        bool: True if the message was handed to the mail backend
    """
    subject = f"Tour enquiry: {enquiry['tour']} ({enquiry['name']})"
    body = (
        f"Name: {enquiry['name']}\n"
        f"Email: {enquiry['email']}\n"
        f"Phone: {enquiry['phone']}\n"
        f"Tour: {enquiry['tour']}\n\n"
        f"{enquiry['message']}\n"
    )

    try:
        EmailMessage(
            subject=subject,
            body=body,
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[settings.CONTACT_EMAIL],
            reply_to=[enquiry["email"]],
        ).send(fail_silently=False)
    except Exception as e:
        logger.error("enquiry.send_failed", tour=enquiry["tour"], error=str(e), exc_info=True)
        return False

    logger.info("enquiry.sent", tour=enquiry["tour"])
    return True
