"""Unit tests for the booking session state machine and pricing."""

from __future__ import annotations

from decimal import Decimal

from django.test import SimpleTestCase

from apps.bookings.domain.entities import BookingSession, CheckoutStatus, InvalidTransition
from apps.bookings.domain.events import CheckoutCancelled, CheckoutFailed, CheckoutRedirected
from apps.bookings.domain.pricing import BookingQuote, parse_unit_price


class PricingTests(SimpleTestCase):
    def test_parse_unit_price_strips_labels(self) -> None:
        self.assertEqual(parse_unit_price("R 1,250"), Decimal("1250"))
        self.assertEqual(parse_unit_price(850), Decimal("850"))
        self.assertEqual(parse_unit_price("R 499.99 pp"), Decimal("499.99"))
        self.assertEqual(parse_unit_price("Custom Price"), Decimal("0"))
        self.assertEqual(parse_unit_price(None), Decimal("0"))
        self.assertEqual(parse_unit_price("1.2.3"), Decimal("0"))

    def test_quote_multiplies_by_guests(self) -> None:
        quote = BookingQuote.for_tour("R 1,250", 2)

        self.assertEqual(quote.total.amount, Decimal("2500"))
        self.assertEqual(quote.amount_cents, 250000)
        self.assertFalse(quote.is_free_or_custom)

    def test_cents_are_rounded(self) -> None:
        self.assertEqual(BookingQuote.for_tour("333.335", 1).amount_cents, 33334)

    def test_free_and_custom_tours(self) -> None:
        self.assertTrue(BookingQuote.for_tour("Free", 2).is_free_or_custom)
        self.assertTrue(BookingQuote.for_tour("Custom", 1).is_free_or_custom)
        self.assertTrue(BookingQuote.for_tour("R 500 (custom itinerary)", 1).is_free_or_custom)
        self.assertTrue(BookingQuote.for_tour(0, 3).is_free_or_custom)

    def test_quote_requires_a_guest(self) -> None:
        with self.assertRaises(ValueError):
            BookingQuote.for_tour(100, 0)

    def test_quote_bounds(self) -> None:
        self.assertEqual(BookingQuote.for_tour("1000000", 1000).amount_cents, 100000000000)
        with self.assertRaises(ValueError):
            BookingQuote.for_tour(100, 1001)
        with self.assertRaises(ValueError):
            BookingQuote.for_tour("9" * 400, 1)


class BookingSessionTests(SimpleTestCase):
    def _submitted_session(self) -> BookingSession:
        session = BookingSession(tour_id="cape-point")
        session.begin_validation()
        session.submit(BookingQuote.for_tour(1000, 2))
        return session

    def test_new_session_is_idle(self) -> None:
        session = BookingSession()
        self.assertIs(session.status, CheckoutStatus.IDLE)
        self.assertFalse(session.is_terminal)

    def test_happy_path_ends_in_redirect(self) -> None:
        session = self._submitted_session()
        self.assertIs(session.status, CheckoutStatus.SUBMITTING)

        session.redirect("ch_1", "https://c.yoco.com/checkout/ch_1")

        self.assertIs(session.status, CheckoutStatus.REDIRECT)
        self.assertTrue(session.is_terminal)
        self.assertEqual(session.redirect_url, "https://c.yoco.com/checkout/ch_1")
        [event] = session.events
        self.assertIsInstance(event, CheckoutRedirected)
        self.assertEqual(event.amount_cents, 200000)
        self.assertEqual(event.to_dict()["checkout_id"], "ch_1")

    def test_rejection_returns_to_idle_with_errors(self) -> None:
        session = BookingSession()
        session.begin_validation()

        session.reject({"email": "Email address is required"})

        self.assertIs(session.status, CheckoutStatus.IDLE)
        self.assertEqual(session.errors, {"email": "Email address is required"})

    def test_rejection_needs_errors(self) -> None:
        session = BookingSession()
        session.begin_validation()
        with self.assertRaises(ValueError):
            session.reject({})

    def test_failed_session_can_retry(self) -> None:
        session = self._submitted_session()
        session.fail("Failed to create checkout")

        self.assertIs(session.status, CheckoutStatus.FAILED)
        self.assertIsInstance(session.events[-1], CheckoutFailed)

        session.begin_validation()
        self.assertIs(session.status, CheckoutStatus.VALIDATING)
        self.assertIsNone(session.failure_reason)

    def test_cancel_from_any_open_state(self) -> None:
        for prepare in (
            lambda s: None,
            lambda s: s.begin_validation(),
        ):
            session = BookingSession()
            prepare(session)
            previous = session.status

            session.cancel("closed the modal")

            self.assertIs(session.status, CheckoutStatus.CANCELLED)
            event = session.events[-1]
            self.assertIsInstance(event, CheckoutCancelled)
            self.assertEqual(event.previous_status, previous.value)

    def test_terminal_states_are_final(self) -> None:
        session = self._submitted_session()
        session.redirect("ch_1", "https://c.yoco.com/checkout/ch_1")

        with self.assertRaises(InvalidTransition):
            session.cancel()
        with self.assertRaises(InvalidTransition):
            session.begin_validation()

        cancelled = BookingSession()
        cancelled.cancel()
        with self.assertRaises(InvalidTransition):
            cancelled.begin_validation()

    def test_illegal_transitions_raise(self) -> None:
        session = BookingSession()
        with self.assertRaises(InvalidTransition):
            session.submit(BookingQuote.for_tour(100, 1))
        with self.assertRaises(InvalidTransition):
            session.fail("nope")
        with self.assertRaises(InvalidTransition):
            session.redirect("ch_1", "https://c.yoco.com/checkout/ch_1")

    def test_unpayable_quote_cannot_be_submitted(self) -> None:
        session = BookingSession()
        session.begin_validation()
        with self.assertRaises(ValueError):
            session.submit(BookingQuote.for_tour("Custom", 1))
        self.assertIs(session.status, CheckoutStatus.VALIDATING)

    def test_clear_events(self) -> None:
        session = self._submitted_session()
        session.fail("boom")
        session.clear_events()
        self.assertEqual(session.events, [])

    def test_pull_events_drains_and_flattens(self) -> None:
        session = self._submitted_session()
        session.fail("boom")
        [event] = session.pull_events()
        self.assertEqual(session.events, [])
        data = event.to_dict()
        self.assertEqual(data["event_type"], "CheckoutFailed")
        self.assertEqual(data["reason"], "boom")
        self.assertEqual(data["aggregate_id"], str(session.id))
