from django.urls import path  # type: ignore

from .views import health

urlpatterns = [
    path('health', health, name='health'),
]
