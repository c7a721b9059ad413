from django.urls import path  # type: ignore

from .views import ExchangeRateView, PriceView

urlpatterns = [
    path('rate', ExchangeRateView.as_view(), name='currency-rate'),
    path('price', PriceView.as_view(), name='currency-price'),
]
