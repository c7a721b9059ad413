from django.urls import path  # type: ignore

from .views import EnquiryView

urlpatterns = [
    path('contact', EnquiryView.as_view(), name='contact'),
]
