"""Event service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

from datetime import date

import structlog

from artists.domain.value_objects import ArtistId
from common.config import BookingConfig
from common.pagination import Page, PageRequest
from events.domain import Event, EventCommand, EventId, EventListCriteria
from events.domain.errors import (
    EventDateInPastError,
    EventDateTooFarError,
    EventNotFoundError,
    EventOwnershipError,
    InvalidEventIdError,
    InvalidOwnerIdError,
    OwnerProfileRequiredError,
    PastEventLockedError,
)
from events.stores.interfaces import EventStore

logger = structlog.get_logger(__name__)


def one_year_after(day: date) -> date:
    """Same calendar day next year; Feb 29 falls back to Feb 28."""
    try:
        return day.replace(year=day.year + 1)
    except ValueError:
        return day.replace(year=day.year + 1, day=28)


class EventService:
    """Service for event creation, changes and listing."""

    def __init__(self, store: EventStore, config: BookingConfig) -> None:
        self._store = store
        self._config = config

    def create_event(self, command: EventCommand, owner_id: str) -> Event:
        """Create an event owned by the caller.

        Raises:
            InvalidOwnerIdError: If the owner id is not a valid UUID.
            OwnerProfileRequiredError: If the caller has no artist profile.
            EventDateInPastError: If the date is before today.
            EventDateTooFarError: If the date is more than one year ahead.
        """
        owner = self._parse_owner_id(owner_id)
        if not self._store.owner_exists(owner):
            raise OwnerProfileRequiredError()
        self._check_event_date(command.event_date)

        event = self._store.create_event(owner, command)
        logger.info(
            "event_created",
            event_id=str(event.id),
            owner_id=str(owner),
            event_date=command.event_date.isoformat(),
        )
        return event

    def get_event(self, event_id: str) -> Event:
        """Return an event with its owner summary.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        target = self._parse_event_id(event_id)
        event = self._store.get_event(target)
        if event is None:
            raise EventNotFoundError(str(target))
        return event

    def update_event(self, event_id: str, command: EventCommand, principal_id: str) -> Event:
        """Replace the event's fields.

        The lock on past events uses the stored date, so a past event cannot be
        moved into the future. A changed date must pass the creation rules again.

        Raises:
            InvalidEventIdError, EventNotFoundError, EventOwnershipError,
            PastEventLockedError, EventDateInPastError, EventDateTooFarError.
        """
        current = self._get_mutable_event(event_id, principal_id)
        if command.event_date != current.event_date:
            self._check_event_date(command.event_date)

        event = self._store.update_event(current.id, command)
        logger.info("event_updated", event_id=str(current.id), owner_id=str(current.owner_id))
        return event

    def delete_event(self, event_id: str, principal_id: str) -> None:
        """Delete an upcoming event owned by the caller.

        Raises:
            InvalidEventIdError, EventNotFoundError, EventOwnershipError,
            PastEventLockedError.
        """
        current = self._get_mutable_event(event_id, principal_id)
        self._store.delete_event(current.id)
        logger.info("event_deleted", event_id=str(current.id), owner_id=str(current.owner_id))

    def list_events(self, criteria: EventListCriteria, page: PageRequest) -> Page[Event]:
        rows, total = self._store.list_events(criteria, page, self._config.today())
        return Page.from_request(rows, total, page)

    def _get_mutable_event(self, event_id: str, principal_id: str) -> Event:
        # ownership is reported even when the event is also in the past
        current = self.get_event(event_id)
        if not self._is_owner(current, principal_id):
            raise EventOwnershipError(str(current.id))
        if current.is_past(self._config.today()):
            raise PastEventLockedError(str(current.id))
        return current

    def _check_event_date(self, event_date: date) -> None:
        today = self._config.today()
        if event_date < today:
            raise EventDateInPastError(event_date)
        if event_date > one_year_after(today):
            raise EventDateTooFarError(event_date)

    @staticmethod
    def _is_owner(event: Event, principal_id: str) -> bool:
        try:
            return ArtistId.from_string(str(principal_id)) == event.owner_id
        except ValueError:
            return False

    @staticmethod
    def _parse_event_id(value: str) -> EventId:
        try:
            return EventId.from_string(value)
        except ValueError as exc:
            raise InvalidEventIdError() from exc

    @staticmethod
    def _parse_owner_id(value: str) -> ArtistId:
        try:
            return ArtistId.from_string(str(value))
        except ValueError as exc:
            raise InvalidOwnerIdError() from exc
