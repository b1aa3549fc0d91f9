"""Payload validation - turns raw request bodies into domain commands.

Only shape and type are checked here. Nothing touches the database.
"""

from typing import Any

from rest_framework import serializers

from events.domain import EventId, EventPayload, TicketPayload
from events.domain.errors import PayloadValidationError
from events.domain.value_objects import MAX_ID


class StrictCharField(serializers.CharField):
    """CharField that refuses numbers and other non-string values."""

    def __init__(self, **kwargs):
        kwargs.setdefault("trim_whitespace", False)
        super().__init__(**kwargs)

    def to_internal_value(self, data):
        if not isinstance(data, str):
            self.fail("invalid")
        return super().to_internal_value(data)


class EventInputSerializer(serializers.Serializer):
    """Shape of POST /events and PUT /events/{id} bodies."""

    name = StrictCharField(max_length=255)
    date = serializers.DateTimeField()


class TicketInputSerializer(serializers.Serializer):
    """Shape of POST /tickets bodies."""

    owner = StrictCharField(max_length=255)
    code = StrictCharField(max_length=255)
    eventId = serializers.IntegerField(min_value=1, max_value=MAX_ID, source="event_id")


def _validated(serializer: serializers.Serializer) -> dict[str, Any]:
    if not serializer.is_valid():
        raise PayloadValidationError(
            {field: [str(message) for message in messages] for field, messages in serializer.errors.items()}
        )
    return serializer.validated_data


def parse_event_payload(data: Any) -> EventPayload:
    """Validate an event body.

    Raises:
        PayloadValidationError: If name is blank or date is not a timestamp.
    """
    values = _validated(EventInputSerializer(data=data))
    return EventPayload(name=values["name"], date=values["date"])


def parse_ticket_payload(data: Any) -> TicketPayload:
    """Validate a ticket body.

    Raises:
        PayloadValidationError: If owner or code is blank or eventId is not a positive integer.
    """
    values = _validated(TicketInputSerializer(data=data))
    return TicketPayload(
        owner=values["owner"],
        code=values["code"],
        event_id=EventId(values["event_id"]),
    )
