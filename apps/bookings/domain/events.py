"""
Booking Domain Events

Events emitted by a booking session when it reaches an outcome. They
are logged once the request has been handled.
"""

from dataclasses import dataclass
from typing import Any, Optional

from shared.domain.base import DomainEvent


@dataclass
class CheckoutRedirected(DomainEvent):
    """The customer is being sent to the hosted checkout page."""
    tour_id: Any = None
    checkout_id: Optional[str] = None
    amount_cents: int = 0


@dataclass
class CheckoutFailed(DomainEvent):
    """Creating the checkout failed; the customer may try again."""
    tour_id: Any = None
    reason: str = ''


@dataclass
class CheckoutCancelled(DomainEvent):
    tour_id: Any = None
    previous_status: str = ''
    reason: str = ''
