"""Fake Yoco HTTP responses shared by the checkout and booking tests."""

from __future__ import annotations

import json
from unittest.mock import MagicMock

GATEWAY_POST = "apps.checkout.gateway.requests.post"


def yoco_response(status_code: int = 200, body=None, *, text: str | None = None, content_type: str = "application/json"):
    response = MagicMock()
    response.status_code = status_code
    response.headers = {"Content-Type": content_type}
    if text is None:
        text = json.dumps(body) if body is not None else ""
    response.text = text
    if body is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    return response


def yoco_checkout(**overrides):
    checkout = {
        "id": "ch_BBqWKJ8ok9Jt6dY",
        "redirectUrl": "https://c.yoco.com/checkout/ch_BBqWKJ8ok9Jt6dY",
        "amount": 250000,
        "currency": "ZAR",
        "status": "created",
        "paymentId": None,
        "processingMode": "test",
        "successUrl": "https://admtravelssa.com/payment/success",
        "metadata": {"source": "admtravels-website"},
    }
    checkout.update(overrides)
    return checkout
