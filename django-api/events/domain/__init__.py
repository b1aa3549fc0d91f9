from events.domain.commands import EventPayload, TicketPayload
from events.domain.models import Event, Ticket
from events.domain.value_objects import EventId, TicketId

__all__ = [
    "Event",
    "Ticket",
    "EventId",
    "TicketId",
    "EventPayload",
    "TicketPayload",
]
