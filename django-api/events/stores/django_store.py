"""Django ORM implementation of the event and ticket stores."""

import logging

from django.db import IntegrityError, transaction

from events import models
from events.domain import Event, EventId, EventPayload, Ticket, TicketId, TicketPayload
from events.domain.errors import (
    EventNameConflictError,
    EventNotFoundError,
    TicketCodeConflictError,
)
from events.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)


def _to_event(row: models.Event) -> Event:
    return Event(id=EventId(row.pk), name=row.name, date=row.date)


def _to_ticket(row: models.Ticket) -> Ticket:
    return Ticket(
        id=TicketId(row.pk),
        owner=row.owner,
        code=row.code,
        used=row.used,
        event_id=EventId(row.event_id),
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [_to_event(row) for row in models.Event.objects.order_by("id")]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return _to_event(row) if row else None

    def find_event_by_name(self, name: str) -> Event | None:
        row = models.Event.objects.filter(name=name).first()
        return _to_event(row) if row else None

    def create_event(self, payload: EventPayload) -> Event:
        try:
            with transaction.atomic():
                row = models.Event.objects.create(name=payload.name, date=payload.date)
        except IntegrityError:
            logger.warning("Unique constraint rejected event name %r", payload.name)
            raise EventNameConflictError(payload.name)
        return _to_event(row)

    def update_event(self, event_id: EventId, payload: EventPayload) -> Event | None:
        try:
            with transaction.atomic():
                updated = models.Event.objects.filter(pk=event_id.value).update(
                    name=payload.name, date=payload.date
                )
        except IntegrityError:
            logger.warning("Unique constraint rejected rename of event %s", event_id)
            raise EventNameConflictError(payload.name)
        if not updated:
            return None
        return self.get_event(event_id)

    def delete_event(self, event_id: EventId) -> bool:
        deleted, _ = models.Event.objects.filter(pk=event_id.value).delete()
        return deleted > 0


class DjangoTicketStore(TicketStore):
    """Relational ticket store using Django ORM."""

    def list_tickets(self, event_id: EventId) -> list[Ticket]:
        rows = models.Ticket.objects.filter(event_id=event_id.value).order_by("id")
        return [_to_ticket(row) for row in rows]

    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        row = models.Ticket.objects.filter(pk=ticket_id.value).first()
        return _to_ticket(row) if row else None

    def code_exists(self, event_id: EventId, code: str) -> bool:
        return models.Ticket.objects.filter(event_id=event_id.value, code=code).exists()

    def create_ticket(self, payload: TicketPayload) -> Ticket:
        try:
            with transaction.atomic():
                row = models.Ticket.objects.create(
                    owner=payload.owner,
                    code=payload.code,
                    event_id=payload.event_id.value,
                )
        except IntegrityError:
            # The foreign key fails too when the event is deleted concurrently.
            if not models.Event.objects.filter(pk=payload.event_id.value).exists():
                raise EventNotFoundError(payload.event_id.value)
            logger.warning(
                "Unique constraint rejected ticket code %r for event %s",
                payload.code,
                payload.event_id,
            )
            raise TicketCodeConflictError(payload.event_id.value, payload.code)
        return _to_ticket(row)

    def mark_used(self, ticket_id: TicketId) -> bool:
        updated = models.Ticket.objects.filter(pk=ticket_id.value, used=False).update(used=True)
        return updated == 1
