from django.urls import path

from events.handlers import (
    EventDetailView,
    EventListView,
    health,
    TicketCreateView,
    TicketListView,
    TicketUseView,
)

urlpatterns = [
    path("health", health, name="health"),
    path("events", EventListView.as_view(), name="event-list"),
    path("events/<str:event_id>", EventDetailView.as_view(), name="event-detail"),
    path("tickets", TicketCreateView.as_view(), name="ticket-create"),
    path("tickets/use/<str:ticket_id>", TicketUseView.as_view(), name="ticket-use"),
    path("tickets/<str:event_id>", TicketListView.as_view(), name="ticket-list"),
]
