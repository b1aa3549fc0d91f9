"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
Write methods raise the domain conflict errors when a unique constraint
rejects the row, even if the service pre-check passed.
"""

from abc import ABC, abstractmethod

from events.domain import Event, EventId, EventPayload, Ticket, TicketId, TicketPayload


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events in insertion order."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def find_event_by_name(self, name: str) -> Event | None:
        """Return the event with exactly this name, or None."""
        ...

    @abstractmethod
    def create_event(self, payload: EventPayload) -> Event:
        """Insert an event.

        Raises:
            EventNameConflictError: If the name is already taken.
        """
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, payload: EventPayload) -> Event | None:
        """Replace name and date of an event, or return None if it is gone.

        Raises:
            EventNameConflictError: If the name is taken by another event.
        """
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> bool:
        """Delete an event and its tickets. Return False if it did not exist."""
        ...


class TicketStore(ABC):
    """Interface for ticket persistence operations."""

    @abstractmethod
    def list_tickets(self, event_id: EventId) -> list[Ticket]:
        """Return tickets of an event in insertion order."""
        ...

    @abstractmethod
    def get_ticket(self, ticket_id: TicketId) -> Ticket | None:
        """Return a ticket by ID, or None if not found."""
        ...

    @abstractmethod
    def code_exists(self, event_id: EventId, code: str) -> bool:
        """Check if the code is registered for the event."""
        ...

    @abstractmethod
    def create_ticket(self, payload: TicketPayload) -> Ticket:
        """Insert an unused ticket.

        Raises:
            TicketCodeConflictError: If the code is already taken for the event.
        """
        ...

    @abstractmethod
    def mark_used(self, ticket_id: TicketId) -> bool:
        """Flip ``used`` to True if it is still False.

        Returns True only for the call that performed the transition.
        """
        ...
