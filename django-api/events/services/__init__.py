from events.services.event_service import EventService
from events.services.ticket_service import TicketService

__all__ = ["EventService", "TicketService"]
