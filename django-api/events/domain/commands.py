"""Validated inputs for Event and Ticket mutations.

Instances are only built by the validation layer, so services can rely on
every field already having the right shape.
"""

from dataclasses import dataclass
from datetime import datetime

from events.domain.value_objects import EventId


@dataclass(frozen=True)
class EventPayload:
    """Name and date for creating or updating an Event."""

    name: str
    date: datetime


@dataclass(frozen=True)
class TicketPayload:
    """Fields required to issue a Ticket."""

    owner: str
    code: str
    event_id: EventId
