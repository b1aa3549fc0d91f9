"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest
from rest_framework.test import APIClient

from events.domain import Event, EventId, EventPayload, Ticket, TicketId, TicketPayload
from events.domain.errors import EventNameConflictError, TicketCodeConflictError
from events.stores.interfaces import EventStore, TicketStore

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


class InMemoryEventStore(EventStore):
    """Dict-backed EventStore for service tests."""

    def __init__(self) -> None:
        self.rows: dict[int, Event] = {}
        self.tickets: "InMemoryTicketStore | None" = None
        self._next_id = 1

    def list_events(self) -> list[Event]:
        return [self.rows[key] for key in sorted(self.rows)]

    def get_event(self, event_id: EventId) -> Event | None:
        return self.rows.get(event_id.value)

    def find_event_by_name(self, name: str) -> Event | None:
        return next((e for e in self.rows.values() if e.name == name), None)

    def create_event(self, payload: EventPayload) -> Event:
        if self.find_event_by_name(payload.name):
            raise EventNameConflictError(payload.name)
        event = Event(id=EventId(self._next_id), name=payload.name, date=payload.date)
        self.rows[self._next_id] = event
        self._next_id += 1
        return event

    def update_event(self, event_id: EventId, payload: EventPayload) -> Event | None:
        if event_id.value not in self.rows:
            return None
        holder = self.find_event_by_name(payload.name)
        if holder and holder.id != event_id:
            raise EventNameConflictError(payload.name)
        event = Event(id=event_id, name=payload.name, date=payload.date)
        self.rows[event_id.value] = event
        return event

    def delete_event(self, event_id: EventId) -> bool:
        if self.rows.pop(event_id.value, None) is None:
            return False
        if self.tickets is not None:
            self.tickets.drop_event(event_id)
        return True


class InMemoryTicketStore(TicketStore):
    """Dict-backed TicketStore for service tests."""

    def __init__(self) -> None:
        self.rows: dict[int, Ticket] = {}
        self._next_id = 1

    def list_tickets(self, event_id: EventId) -> list[Ticket]:
        return [self.rows[key] for key in sorted(self.rows) if self.rows[key].event_id == event_id]

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        return self.rows.get(ticket_id.value)

    def code_exists(self, event_id: EventId, code: str) -> bool:
        return any(t.event_id == event_id and t.code == code for t in self.rows.values())

    def create_ticket(self, payload: TicketPayload) -> Ticket:
        if self.code_exists(payload.event_id, payload.code):
            raise TicketCodeConflictError(payload.event_id.value, payload.code)
        ticket = Ticket(
            id=TicketId(self._next_id),
            owner=payload.owner,
            code=payload.code,
            used=False,
            event_id=payload.event_id,
        )
        self.rows[self._next_id] = ticket
        self._next_id += 1
        return ticket

    def mark_used(self, ticket_id: TicketId) -> bool:
        ticket = self.rows.get(ticket_id.value)
        if ticket is None or ticket.used:
            return False
        self.rows[ticket_id.value] = Ticket(
            id=ticket.id,
            owner=ticket.owner,
            code=ticket.code,
            used=True,
            event_id=ticket.event_id,
        )
        return True

    def drop_event(self, event_id: EventId) -> None:
        for key in [k for k, t in self.rows.items() if t.event_id == event_id]:
            del self.rows[key]


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def ticket_store(event_store: InMemoryEventStore) -> InMemoryTicketStore:
    store = InMemoryTicketStore()
    event_store.tickets = store
    return store


@pytest.fixture
def future_date() -> datetime:
    return NOW + timedelta(days=30)


@pytest.fixture
def past_date() -> datetime:
    return NOW - timedelta(days=30)


@pytest.fixture
def now() -> datetime:
    return NOW
