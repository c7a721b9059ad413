"""URL routing for the checkout proxy."""

from __future__ import annotations

from django.urls import path  # type: ignore

from .views import YocoCheckoutView, payment_status

urlpatterns = [
    path('yoco-checkout', YocoCheckoutView.as_view(), name='yoco-checkout'),
    path('payment-status/<str:kind>', payment_status, name='payment-status'),
]
