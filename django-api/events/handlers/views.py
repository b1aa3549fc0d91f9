"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Let domain errors propagate to the exception handler for HTTP mapping
- Never contain business logic
- Never expose internal error details
"""

from django.http import HttpRequest, HttpResponse
from django.views.decorators.http import require_GET
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from events.handlers.serializers import EventSerializer, TicketSerializer
from events.handlers.validation import parse_event_payload, parse_ticket_payload
from events.services import EventService, TicketService
from events.services.event_service import parse_event_id
from events.stores import DjangoEventStore, DjangoTicketStore


def get_event_service() -> EventService:
    return EventService(DjangoEventStore())


def get_ticket_service() -> TicketService:
    return TicketService(DjangoTicketStore(), DjangoEventStore())


class EventListView(APIView):
    """Handler for GET /events and POST /events"""

    def get(self, request: Request) -> Response:
        events = get_event_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        payload = parse_event_payload(request.data)
        event = get_event_service().create_event(payload)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET, PUT and DELETE /events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = get_event_service().get_event(event_id)
        return Response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        # A malformed id is reported before a malformed body.
        parse_event_id(event_id)
        payload = parse_event_payload(request.data)
        event = get_event_service().update_event(event_id, payload)
        return Response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        get_event_service().delete_event(event_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


class TicketCreateView(APIView):
    """Handler for POST /tickets"""

    def post(self, request: Request) -> Response:
        payload = parse_ticket_payload(request.data)
        ticket = get_ticket_service().create_ticket(payload)
        return Response(TicketSerializer(ticket).data, status=status.HTTP_201_CREATED)


class TicketListView(APIView):
    """Handler for GET /tickets/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        tickets = get_ticket_service().list_tickets(event_id)
        return Response(TicketSerializer(tickets, many=True).data)


class TicketUseView(APIView):
    """Handler for PUT /tickets/use/{ticket_id}"""

    def put(self, request: Request, ticket_id: str) -> Response:
        get_ticket_service().use_ticket(ticket_id)
        return Response(status=status.HTTP_204_NO_CONTENT)


@require_GET
def health(request: HttpRequest) -> HttpResponse:
    """Handler for GET /health"""
    return HttpResponse("I'm okay!", content_type="text/plain; charset=utf-8")
