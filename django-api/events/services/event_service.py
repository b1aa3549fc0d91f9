"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging

from events.domain import Event, EventId, EventPayload
from events.domain.errors import EventNameConflictError, EventNotFoundError, InvalidIdError
from events.stores.interfaces import EventStore

logger = logging.getLogger(__name__)


def parse_event_id(raw: str) -> EventId:
    """Parse a route parameter into an EventId.

    Raises:
        InvalidIdError: If the value is not a positive integer.
    """
    try:
        return EventId.from_string(raw)
    except (TypeError, ValueError):
        raise InvalidIdError() from None


class EventService:
    """Service for event operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        return self._require_event(parse_event_id(event_id))

    def create_event(self, payload: EventPayload) -> Event:
        """Create an event with a name no other event uses.

        Raises:
            EventNameConflictError: If the name is already taken.
        """
        if self._store.find_event_by_name(payload.name) is not None:
            logger.warning("Rejected event create: name %r already taken", payload.name)
            raise EventNameConflictError(payload.name)

        event = self._store.create_event(payload)
        logger.info("Created event %s", event.id)
        return event

    def update_event(self, event_id: str, payload: EventPayload) -> Event:
        """Rename and reschedule an event.

        Keeping the current name is allowed.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
            EventNameConflictError: If another event already has the new name.
        """
        current = self._require_event(parse_event_id(event_id))

        if payload.name != current.name:
            holder = self._store.find_event_by_name(payload.name)
            if holder is not None and holder.id != current.id:
                logger.warning(
                    "Rejected rename of event %s: name %r already taken", current.id, payload.name
                )
                raise EventNameConflictError(payload.name)

        updated = self._store.update_event(current.id, payload)
        if updated is None:
            raise EventNotFoundError(current.id.value)
        logger.info("Updated event %s", updated.id)
        return updated

    def delete_event(self, event_id: str) -> None:
        """Delete an event together with its tickets.

        Raises:
            InvalidIdError: If the event_id is not a positive integer.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._store.delete_event(parsed):
            raise EventNotFoundError(parsed.value)
        logger.info("Deleted event %s and its tickets", parsed)

    def _require_event(self, event_id: EventId) -> Event:
        event = self._store.get_event(event_id)
        if event is None:
            raise EventNotFoundError(event_id.value)
        return event
