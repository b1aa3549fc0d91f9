"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId, TicketId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    name: str
    date: datetime

    def has_happened(self, now: datetime) -> bool:
        """True when the event date is strictly before ``now``."""
        return self.date < now


@dataclass(frozen=True)
class Ticket:
    """Domain representation of a Ticket."""

    id: TicketId
    owner: str
    code: str
    used: bool
    event_id: EventId
