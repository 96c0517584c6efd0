"""Domain error codes for the events module."""

from datetime import date
from enum import Enum

from common.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_OWNER_ID = "INVALID_OWNER_ID"
    EVENT_DATE_IN_PAST = "EVENT_DATE_IN_PAST"
    EVENT_DATE_TOO_FAR = "EVENT_DATE_TOO_FAR"
    EVENT_OWNERSHIP = "EVENT_OWNERSHIP"
    PAST_EVENT_LOCKED = "PAST_EVENT_LOCKED"
    PROFILE_REQUIRED = "PROFILE_REQUIRED"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidOwnerIdError(DomainError):
    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_OWNER_ID,
            message="Invalid user ID format",
        )


class EventDateInPastError(DomainError):
    kind = ErrorKind.VALIDATION

    def __init__(self, event_date: date) -> None:
        super().__init__(
            code=ErrorCode.EVENT_DATE_IN_PAST,
            message="Event date must be today or in the future",
            details=[{"field": "event_date", "message": "Event date must be today or in the future"}],
        )
        self.event_date = event_date


class EventDateTooFarError(DomainError):
    kind = ErrorKind.VALIDATION

    def __init__(self, event_date: date) -> None:
        super().__init__(
            code=ErrorCode.EVENT_DATE_TOO_FAR,
            message="Event date must be within one year from today",
            details=[
                {"field": "event_date", "message": "Event date must be within one year from today"}
            ],
        )
        self.event_date = event_date


class EventOwnershipError(DomainError):
    """Raised when a principal tries to change an event it does not own."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_OWNERSHIP,
            message="Cannot modify other user's events",
        )
        self.event_id = event_id


class PastEventLockedError(DomainError):
    """Raised when the stored event date has already passed."""

    kind = ErrorKind.BUSINESS_LOGIC

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.PAST_EVENT_LOCKED,
            message="Cannot modify past events",
        )
        self.event_id = event_id


class OwnerProfileRequiredError(DomainError):
    kind = ErrorKind.BUSINESS_LOGIC

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROFILE_REQUIRED,
            message="Artist profile required to create events",
        )
