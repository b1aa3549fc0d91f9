"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
The unique constraints are the final guard for name and code uniqueness.
"""

from django.db import models


class Event(models.Model):
    """Persistence model for events."""

    name = models.CharField(max_length=255)
    date = models.DateTimeField()

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(fields=["name"], name="unique_event_name"),
        ]

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for tickets."""

    owner = models.CharField(max_length=255)
    code = models.CharField(max_length=255)
    used = models.BooleanField(default=False)
    event = models.ForeignKey(Event, on_delete=models.CASCADE, related_name="tickets")

    class Meta:
        ordering = ["id"]
        constraints = [
            models.UniqueConstraint(
                fields=["event", "code"],
                name="unique_ticket_code_per_event",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.code} - {self.owner}"
