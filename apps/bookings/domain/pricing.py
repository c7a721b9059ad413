"""
Tour Pricing

Tour prices are per person, in ZAR, and arrive as whatever the tour
catalogue holds: a number, a label such as "R 1,250", or text like
"Custom" or "Free" for tours that cannot be paid online.
"""

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from shared.domain.base import ValueObject
from shared.domain.value_objects import Money

_NON_PRICE_CHARS = re.compile(r'[^0-9.]')
_UNPAYABLE_LABEL = re.compile(r'custom|free', re.IGNORECASE)

BOOKING_CURRENCY = 'ZAR'
MAX_GUESTS = 1000
MAX_UNIT_PRICE = Decimal('1000000')


def parse_unit_price(price) -> Decimal:
    """Digits and dots of the price label; anything unparseable is 0."""
    text = _NON_PRICE_CHARS.sub('', '' if price is None else str(price))
    if not text:
        return Decimal('0')
    try:
        return Decimal(text)
    except InvalidOperation:
        return Decimal('0')


@dataclass(frozen=True)
class BookingQuote(ValueObject):
    """
    Price of a booking: per-person price times number of guests.

    Tours whose total is zero or whose price label says "custom" or
    "free" are free-or-custom and are booked by enquiry instead.
    """
    unit_price: Money
    guests: int
    price_label: str = ''

    def __post_init__(self):
        if self.guests < 1:
            raise ValueError("Guests count must be at least 1")
        if self.guests > MAX_GUESTS:
            raise ValueError(f"Guests count cannot exceed {MAX_GUESTS}")
        if self.unit_price.amount > MAX_UNIT_PRICE:
            raise ValueError("Unit price is out of range")

    @classmethod
    def for_tour(cls, price, guests: int) -> 'BookingQuote':
        return cls(
            unit_price=Money(parse_unit_price(price), BOOKING_CURRENCY),
            guests=guests,
            price_label='' if price is None else str(price),
        )

    @property
    def total(self) -> Money:
        return self.unit_price * self.guests

    @property
    def amount_cents(self) -> int:
        return self.total.to_cents()

    @property
    def is_free_or_custom(self) -> bool:
        return self.total.is_zero() or bool(_UNPAYABLE_LABEL.search(self.price_label))
