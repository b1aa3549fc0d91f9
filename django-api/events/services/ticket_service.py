"""Ticket service - issuance and single-use rules for tickets."""

import logging
from collections.abc import Callable
from datetime import datetime

from django.utils import timezone

from events.domain import EventId, Ticket, TicketId, TicketPayload
from events.domain.errors import (
    EventAlreadyHappenedError,
    EventNotFoundError,
    InvalidIdError,
    TicketAlreadyUsedError,
    TicketCodeConflictError,
    TicketNotFoundError,
)
from events.services.event_service import parse_event_id
from events.stores.interfaces import EventStore, TicketStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def parse_ticket_id(raw: str) -> TicketId:
    """Parse a route parameter into a TicketId.

    Raises:
        InvalidIdError: If the value is not a positive integer.
    """
    try:
        return TicketId.from_string(raw)
    except (TypeError, ValueError):
        raise InvalidIdError() from None


class TicketService:
    """Service for ticket operations."""

    def __init__(
        self,
        tickets: TicketStore,
        events: EventStore,
        clock: Clock = timezone.now,
    ) -> None:
        self._tickets = tickets
        self._events = events
        self._clock = clock

    def list_tickets(self, event_id: str) -> list[Ticket]:
        """Return the tickets of an event.

        An unknown event yields an empty list rather than an error.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
        """
        return self._tickets.list_tickets(parse_event_id(event_id))

    def create_ticket(self, payload: TicketPayload) -> Ticket:
        """Issue an unused ticket for an upcoming event.

        Raises:
            EventNotFoundError: If the event does not exist.
            EventAlreadyHappenedError: If the event date is in the past.
            TicketCodeConflictError: If the code is taken for this event.
        """
        self._require_upcoming_event(payload.event_id)

        if self._tickets.code_exists(payload.event_id, payload.code):
            logger.warning(
                "Rejected ticket: code %r already registered for event %s",
                payload.code,
                payload.event_id,
            )
            raise TicketCodeConflictError(payload.event_id.value, payload.code)

        ticket = self._tickets.create_ticket(payload)
        logger.info("Issued ticket %s for event %s", ticket.id, ticket.event_id)
        return ticket

    def use_ticket(self, ticket_id: str) -> None:
        """Mark a ticket as used.

        The already-used check runs before the event date check.

        Raises:
            InvalidIdError: If the ticket_id is not a positive integer.
            TicketNotFoundError: If the ticket does not exist.
            TicketAlreadyUsedError: If the ticket was used before.
            EventAlreadyHappenedError: If the event date is in the past.
        """
        parsed = parse_ticket_id(ticket_id)
        ticket = self._tickets.get_ticket(parsed)
        if ticket is None:
            raise TicketNotFoundError(parsed.value)

        if ticket.used:
            logger.warning("Rejected use of ticket %s: already used", parsed)
            raise TicketAlreadyUsedError(parsed.value)

        self._require_upcoming_event(ticket.event_id)

        # Another request may have used the ticket since it was loaded.
        if not self._tickets.mark_used(parsed):
            logger.warning("Rejected use of ticket %s: used concurrently", parsed)
            raise TicketAlreadyUsedError(parsed.value)
        logger.info("Ticket %s used", parsed)

    def _require_upcoming_event(self, event_id: EventId) -> None:
        event = self._events.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id.value)
        if event.has_happened(self._clock()):
            logger.warning("Rejected ticket operation: event %s already happened", event_id)
            raise EventAlreadyHappenedError(event_id.value)
