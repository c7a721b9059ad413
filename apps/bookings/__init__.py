"""Bookings app package.

This app encapsulates the tour booking flow: validating the booking
form, pricing the booking per guest and running the booking session
that ends with the customer on the payment gateway's hosted checkout.
Nothing is persisted; the gateway owns the payment record.
"""
