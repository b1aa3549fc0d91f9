"""Unit tests for TicketService.

Run with: pytest tests/test_ticket_service.py -v
"""

import pytest

from events.domain import EventId, EventPayload, TicketPayload
from events.domain.errors import (
    EventAlreadyHappenedError,
    EventNotFoundError,
    InvalidIdError,
    TicketAlreadyUsedError,
    TicketCodeConflictError,
    TicketNotFoundError,
)
from events.services import TicketService


@pytest.fixture
def service(ticket_store, event_store, now) -> TicketService:
    return TicketService(ticket_store, event_store, clock=lambda: now)


@pytest.fixture
def upcoming(event_store, future_date):
    return event_store.create_event(EventPayload(name="Upcoming", date=future_date))


@pytest.fixture
def expired(event_store, past_date):
    return event_store.create_event(EventPayload(name="Expired", date=past_date))


class TestListTickets:
    """Tests for TicketService.list_tickets."""

    def test_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidIdError):
            service.list_tickets("-1")

    def test_unknown_event_gives_empty_list(self, service):
        assert service.list_tickets("12345") == []

    def test_returns_only_tickets_of_event(self, service, event_store, upcoming, future_date):
        other = event_store.create_event(EventPayload(name="Other", date=future_date))
        first = service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))
        second = service.create_ticket(TicketPayload(owner="Bo", code="X2", event_id=upcoming.id))
        service.create_ticket(TicketPayload(owner="Cy", code="X1", event_id=other.id))

        assert service.list_tickets(str(upcoming.id)) == [first, second]


class TestCreateTicket:
    """Tests for TicketService.create_ticket."""

    def test_creates_unused_ticket(self, service, upcoming):
        ticket = service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))

        assert ticket.used is False
        assert ticket.event_id == upcoming.id
        assert (ticket.owner, ticket.code) == ("Al", "X1")

    def test_unknown_event_raises_not_found(self, service):
        with pytest.raises(EventNotFoundError):
            service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=EventId(77)))

    def test_expired_event_forbidden(self, service, expired):
        with pytest.raises(EventAlreadyHappenedError):
            service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=expired.id))

    def test_expired_event_forbidden_even_with_duplicate_code(self, service, ticket_store, expired):
        ticket_store.create_ticket(TicketPayload(owner="Al", code="X1", event_id=expired.id))

        with pytest.raises(EventAlreadyHappenedError):
            service.create_ticket(TicketPayload(owner="Bo", code="X1", event_id=expired.id))

    def test_duplicate_code_for_same_event_conflicts(self, service, upcoming):
        service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))

        with pytest.raises(TicketCodeConflictError):
            service.create_ticket(TicketPayload(owner="Bo", code="X1", event_id=upcoming.id))

    def test_same_code_allowed_for_different_events(self, service, event_store, upcoming, future_date):
        other = event_store.create_event(EventPayload(name="Other", date=future_date))
        service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))

        ticket = service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=other.id))

        assert ticket.event_id == other.id


class TestUseTicket:
    """Tests for TicketService.use_ticket."""

    def test_invalid_id_raises_error(self, service):
        with pytest.raises(InvalidIdError):
            service.use_ticket("a")

    def test_unknown_ticket_raises_not_found(self, service):
        with pytest.raises(TicketNotFoundError, match="Ticket with id 9 not found."):
            service.use_ticket("9")

    def test_marks_ticket_used(self, service, ticket_store, upcoming):
        ticket = service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))

        service.use_ticket(str(ticket.id))

        assert ticket_store.get_ticket(ticket.id).used is True

    def test_second_use_forbidden(self, service, upcoming):
        ticket = service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))
        service.use_ticket(str(ticket.id))

        for _ in range(2):
            with pytest.raises(TicketAlreadyUsedError):
                service.use_ticket(str(ticket.id))

    def test_expired_event_forbidden(self, service, ticket_store, expired):
        ticket = ticket_store.create_ticket(TicketPayload(owner="Al", code="X1", event_id=expired.id))

        with pytest.raises(EventAlreadyHappenedError):
            service.use_ticket(str(ticket.id))

        assert ticket_store.get_ticket(ticket.id).used is False

    def test_already_used_checked_before_expiration(self, service, ticket_store, expired):
        ticket = ticket_store.create_ticket(TicketPayload(owner="Al", code="X1", event_id=expired.id))
        ticket_store.mark_used(ticket.id)

        with pytest.raises(TicketAlreadyUsedError):
            service.use_ticket(str(ticket.id))

    def test_lost_race_reports_already_used(self, service, ticket_store, upcoming, monkeypatch):
        ticket = service.create_ticket(TicketPayload(owner="Al", code="X1", event_id=upcoming.id))
        monkeypatch.setattr(ticket_store, "mark_used", lambda ticket_id: False)

        with pytest.raises(TicketAlreadyUsedError):
            service.use_ticket(str(ticket.id))


class TestDefaultClock:
    """Tests for the clock TicketService uses when none is given."""

    def test_default_clock_is_django_timezone_now(self, ticket_store, event_store):
        from django.utils import timezone

        service = TicketService(ticket_store, event_store)

        assert service._clock is timezone.now
