"""Content of the pages the gateway redirects back to."""

PAYMENT_SUCCESS = "success"
PAYMENT_CANCELLED = "cancelled"
PAYMENT_FAILED = "failed"

# Paths on the public site, relative to SITE_URL
REDIRECT_PATHS = {
    "cancelUrl": f"/payment/{PAYMENT_CANCELLED}",
    "successUrl": f"/payment/{PAYMENT_SUCCESS}",
    "failureUrl": f"/payment/{PAYMENT_FAILED}",
}

PAYMENT_STATUS_PAGES = {
    PAYMENT_SUCCESS: {
        "title": "Payment successful",
        "description": (
            "Thank you! Your payment was processed successfully. "
            "A confirmation email will arrive shortly."
        ),
        "actionLabel": "Back to home",
        "actionHref": "/",
    },
    PAYMENT_CANCELLED: {
        "title": "Payment cancelled",
        "description": (
            "Looks like the checkout was cancelled. You can restart the payment "
            "at any time from the booking modal."
        ),
        "actionLabel": "Browse tours",
        "actionHref": "/tours",
    },
    PAYMENT_FAILED: {
        "title": "Payment failed",
        "description": (
            "We could not complete the transaction. Please retry or contact "
            "support if the problem persists."
        ),
        "actionLabel": "Try again",
        "actionHref": "/contact",
    },
}
