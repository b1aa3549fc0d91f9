"""Serializers for transforming domain models to API responses."""

from rest_framework import serializers


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.IntegerField(source="id.value")
    name = serializers.CharField()
    date = serializers.DateTimeField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.IntegerField(source="id.value")
    owner = serializers.CharField()
    code = serializers.CharField()
    used = serializers.BooleanField()
    eventId = serializers.IntegerField(source="event_id.value")
