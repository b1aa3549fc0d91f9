from events.handlers.views import (
    EventDetailView,
    EventListView,
    health,
    TicketCreateView,
    TicketListView,
    TicketUseView,
)

__all__ = [
    "EventListView",
    "EventDetailView",
    "TicketCreateView",
    "TicketListView",
    "TicketUseView",
    "health",
]
