"""Domain error codes for the events module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ID = "INVALID_ID"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    EVENT_NAME_CONFLICT = "EVENT_NAME_CONFLICT"
    TICKET_CODE_CONFLICT = "TICKET_CODE_CONFLICT"
    EVENT_ALREADY_HAPPENED = "EVENT_ALREADY_HAPPENED"
    TICKET_ALREADY_USED = "TICKET_ALREADY_USED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class InvalidIdError(DomainError):
    """Raised when a route id is not a positive integer."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ID,
            message="Invalid id.",
        )


class PayloadValidationError(DomainError):
    """Raised when a request payload has malformed fields."""

    def __init__(self, errors: dict[str, list[str]]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_FAILED,
            message="Invalid payload: " + ", ".join(sorted(errors)),
        )
        self.errors = errors


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message=f"Event with id {event_id} not found.",
        )
        self.event_id = event_id


class TicketNotFoundError(DomainError):
    """Raised when a ticket is not found."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message=f"Ticket with id {ticket_id} not found.",
        )
        self.ticket_id = ticket_id


class EventNameConflictError(DomainError):
    """Raised when another event already uses the name."""

    def __init__(self, name: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NAME_CONFLICT,
            message=f"An event named {name!r} already exists.",
        )
        self.name = name


class TicketCodeConflictError(DomainError):
    """Raised when the code is already registered for the event."""

    def __init__(self, event_id: int, code: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_CODE_CONFLICT,
            message=f"Ticket code {code!r} already registered for event {event_id}.",
        )
        self.event_id = event_id
        self.ticket_code = code


class EventAlreadyHappenedError(DomainError):
    """Raised when tickets are issued or used for a past event."""

    def __init__(self, event_id: int) -> None:
        super().__init__(
            code=ErrorCode.EVENT_ALREADY_HAPPENED,
            message=f"Event with id {event_id} has already happened.",
        )
        self.event_id = event_id


class TicketAlreadyUsedError(DomainError):
    """Raised when a ticket is used a second time."""

    def __init__(self, ticket_id: int) -> None:
        super().__init__(
            code=ErrorCode.TICKET_ALREADY_USED,
            message=f"Ticket with id {ticket_id} has already been used.",
        )
        self.ticket_id = ticket_id
