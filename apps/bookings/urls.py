"""URL routing for the booking domain."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import BookingCheckoutView, BookingQuoteView

urlpatterns = [
    path('quote', BookingQuoteView.as_view(), name='booking-quote'),
    path('checkout', BookingCheckoutView.as_view(), name='booking-checkout'),
]
