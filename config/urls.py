"""URL configuration for the ADM Travels backend.

The `urlpatterns` list routes the `/api/` prefix to each domain app. The
checkout proxy and health check keep the paths the front-end already
calls.
"""
from django.urls import include, path  # type: ignore
from drf_spectacular.views import SpectacularAPIView  # type: ignore

urlpatterns = [
    path('api/', include('apps.core.urls')),
    path('api/', include('apps.checkout.urls')),
    path('api/bookings/', include('apps.bookings.urls')),
    path('api/currency/', include('apps.currency.urls')),
    path('api/', include('apps.enquiries.urls')),
    # OpenAPI schema
    path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
]
