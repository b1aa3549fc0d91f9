"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from typing import Self

# Upper bound of the integer primary key columns.
MAX_ID = 2**31 - 1


def _parse_positive_int(value: str) -> int:
    if not isinstance(value, str) or not re.fullmatch(r"[0-9]+", value):
        raise ValueError(f"Not a decimal integer: {value!r}")
    parsed = int(value)
    if parsed < 1 or parsed > MAX_ID:
        raise ValueError(f"Id out of range: {value!r}")
    return parsed


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not 1 <= self.value <= MAX_ID:
            raise ValueError("EventId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class TicketId:
    """Unique identifier for a Ticket."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not 1 <= self.value <= MAX_ID:
            raise ValueError("TicketId must be a positive integer")

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=_parse_positive_int(value))

    def __str__(self) -> str:
        return str(self.value)
