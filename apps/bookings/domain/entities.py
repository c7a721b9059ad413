"""
Booking Domain Entities

- CheckoutStatus: FSM states of the booking flow
- BookingSession: one attempt to book a tour and pay for it
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from shared.domain.base import Aggregate

from .events import CheckoutCancelled, CheckoutFailed, CheckoutRedirected
from .pricing import BookingQuote


class CheckoutStatus(Enum):
    """
    Booking Session Finite State Machine

    State transitions:
    - IDLE -> VALIDATING (customer submits the form)
    - VALIDATING -> IDLE (form rejected, errors shown)
    - VALIDATING -> SUBMITTING (form valid, checkout requested)
    - SUBMITTING -> REDIRECT (checkout created, customer sent to gateway)
    - SUBMITTING -> FAILED (checkout could not be created)
    - FAILED -> VALIDATING (customer retries)
    - any non-terminal state -> CANCELLED
    """
    IDLE = 'idle'
    VALIDATING = 'validating'
    SUBMITTING = 'submitting'
    REDIRECT = 'redirect'
    CANCELLED = 'cancelled'
    FAILED = 'failed'


TRANSITIONS = {
    CheckoutStatus.IDLE: {CheckoutStatus.VALIDATING, CheckoutStatus.CANCELLED},
    CheckoutStatus.VALIDATING: {CheckoutStatus.IDLE, CheckoutStatus.SUBMITTING, CheckoutStatus.CANCELLED},
    CheckoutStatus.SUBMITTING: {CheckoutStatus.REDIRECT, CheckoutStatus.FAILED, CheckoutStatus.CANCELLED},
    CheckoutStatus.FAILED: {CheckoutStatus.VALIDATING, CheckoutStatus.CANCELLED},
    CheckoutStatus.REDIRECT: set(),
    CheckoutStatus.CANCELLED: set(),
}


class InvalidTransition(ValueError):
    """The booking session cannot move to the requested state."""

    def __init__(self, current: CheckoutStatus, target: CheckoutStatus):
        super().__init__(f"Cannot move booking session from {current.value} to {target.value}")
        self.current = current
        self.target = target


@dataclass(eq=False)
class BookingSession(Aggregate):
    """
    Booking Session Aggregate Root

    Tracks a single booking attempt from form submission to the hand-off
    to the payment gateway.

    Key invariants:
    - Only transitions listed in TRANSITIONS are allowed
    - REDIRECT and CANCELLED are terminal
    - A session is only submitted with a payable quote
    """
    tour_id: Any = None
    status: CheckoutStatus = CheckoutStatus.IDLE
    errors: Dict[str, str] = field(default_factory=dict)
    quote: Optional[BookingQuote] = None
    checkout_id: Optional[str] = None
    redirect_url: Optional[str] = None
    failure_reason: Optional[str] = None

    def _move_to(self, target: CheckoutStatus):
        if target not in TRANSITIONS[self.status]:
            raise InvalidTransition(self.status, target)
        self.status = target
        self.touch()

    def begin_validation(self):
        """IDLE/FAILED -> VALIDATING"""
        self._move_to(CheckoutStatus.VALIDATING)
        self.errors = {}
        self.failure_reason = None

    def reject(self, errors: Dict[str, str]):
        """VALIDATING -> IDLE, keeping the field errors for the customer"""
        if not errors:
            raise ValueError("A rejected booking needs at least one error")
        self._move_to(CheckoutStatus.IDLE)
        self.errors = dict(errors)

    def submit(self, quote: BookingQuote):
        """VALIDATING -> SUBMITTING"""
        if quote.is_free_or_custom:
            raise ValueError("Free or custom-priced tours cannot be paid online")
        self._move_to(CheckoutStatus.SUBMITTING)
        self.quote = quote

    def redirect(self, checkout_id: Optional[str], redirect_url: str):
        """
        SUBMITTING -> REDIRECT

        Events: CheckoutRedirected
        """
        if not redirect_url:
            raise ValueError("Redirect URL is required")
        self._move_to(CheckoutStatus.REDIRECT)
        self.checkout_id = checkout_id
        self.redirect_url = redirect_url

        self.add_event(CheckoutRedirected(
            aggregate_id=self.id,
            tour_id=self.tour_id,
            checkout_id=checkout_id,
            amount_cents=self.quote.amount_cents if self.quote else 0,
        ))

    def fail(self, reason: str):
        """
        SUBMITTING -> FAILED

        Events: CheckoutFailed
        """
        self._move_to(CheckoutStatus.FAILED)
        self.failure_reason = reason

        self.add_event(CheckoutFailed(
            aggregate_id=self.id,
            tour_id=self.tour_id,
            reason=reason,
        ))

    def cancel(self, reason: str = ''):
        """
        Any non-terminal state -> CANCELLED

        Events: CheckoutCancelled
        """
        previous = self.status
        self._move_to(CheckoutStatus.CANCELLED)

        self.add_event(CheckoutCancelled(
            aggregate_id=self.id,
            tour_id=self.tour_id,
            previous_status=previous.value,
            reason=reason,
        ))

    @property
    def is_terminal(self) -> bool:
        return not TRANSITIONS[self.status]

    def __str__(self):
        return f"BookingSession {self.id} ({self.status.value})"
