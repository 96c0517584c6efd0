"""Unit tests for EventService.

These test error handling and domain error mapping.
Run with: pytest tests/test_event_service.py -v
"""

import uuid
from datetime import date, datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from artists.domain import ArtistId
from common.pagination import PageRequest
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
from events.services.event_service import EventService
from events.stores.interfaces import EventStore

STAMP = datetime(2025, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def store() -> Mock:
    mock = Mock(spec=EventStore)
    mock.owner_exists.return_value = True
    return mock


@pytest.fixture
def service(store, booking_config) -> EventService:
    return EventService(store, booking_config)


@pytest.fixture
def today(booking_config) -> date:
    return booking_config.today()


@pytest.fixture
def owner_id() -> str:
    return str(uuid.uuid4())


def command_on(event_date: date) -> EventCommand:
    return EventCommand(
        event_name="Warehouse Night",
        country="Poland",
        city="Warsaw",
        venue_name="Smolna",
        event_date=event_date,
    )


def stored_event(owner_id: str, event_date: date) -> Event:
    return Event(
        id=EventId(uuid.uuid4()),
        owner_id=ArtistId.from_string(owner_id),
        event_name="Warehouse Night",
        country="Poland",
        city="Warsaw",
        venue_name="Smolna",
        event_date=event_date,
        event_time=None,
        created_at=STAMP,
        updated_at=STAMP,
    )


class TestCreateEvent:
    def test_today_is_accepted(self, service, store, owner_id, today):
        command = command_on(today)
        service.create_event(command, owner_id)
        store.create_event.assert_called_once_with(ArtistId.from_string(owner_id), command)

    def test_yesterday_is_rejected(self, service, store, owner_id, today):
        with pytest.raises(EventDateInPastError) as exc_info:
            service.create_event(command_on(today - timedelta(days=1)), owner_id)
        assert exc_info.value.message == "Event date must be today or in the future"
        store.create_event.assert_not_called()

    def test_exactly_one_year_ahead_is_accepted(self, service, store, owner_id, today):
        service.create_event(command_on(today.replace(year=today.year + 1)), owner_id)
        store.create_event.assert_called_once()

    def test_400_days_ahead_is_rejected(self, service, store, owner_id, today):
        with pytest.raises(EventDateTooFarError) as exc_info:
            service.create_event(command_on(today + timedelta(days=400)), owner_id)
        assert exc_info.value.message == "Event date must be within one year from today"
        assert exc_info.value.status == 400

    def test_owner_without_profile_is_rejected(self, service, store, owner_id, today):
        store.owner_exists.return_value = False
        with pytest.raises(OwnerProfileRequiredError):
            service.create_event(command_on(today), owner_id)

    def test_invalid_owner_id_raises_error(self, service, today):
        with pytest.raises(InvalidOwnerIdError):
            service.create_event(command_on(today), "owner")


class TestGetEvent:
    def test_get_event_invalid_id_raises_error(self, service, store):
        """get_event raises InvalidEventIdError for malformed UUID."""
        with pytest.raises(InvalidEventIdError):
            service.get_event("not-a-uuid")
        store.get_event.assert_not_called()

    def test_get_event_not_found_raises_error(self, service, store):
        """get_event raises EventNotFoundError when store returns None."""
        store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            service.get_event(str(uuid.uuid4()))


class TestUpdateEvent:
    def test_other_principal_is_forbidden(self, service, store, owner_id, today):
        event = stored_event(owner_id, today + timedelta(days=10))
        store.get_event.return_value = event
        with pytest.raises(EventOwnershipError) as exc_info:
            service.update_event(str(event.id), command_on(event.event_date), str(uuid.uuid4()))
        assert exc_info.value.status == 403
        store.update_event.assert_not_called()

    def test_ownership_reported_before_past_lock(self, service, store, owner_id, today):
        event = stored_event(owner_id, today - timedelta(days=10))
        store.get_event.return_value = event
        with pytest.raises(EventOwnershipError):
            service.update_event(str(event.id), command_on(today), str(uuid.uuid4()))

    def test_past_event_cannot_be_moved_forward(self, service, store, owner_id, today):
        event = stored_event(owner_id, today - timedelta(days=1))
        store.get_event.return_value = event
        with pytest.raises(PastEventLockedError) as exc_info:
            service.update_event(str(event.id), command_on(today + timedelta(days=5)), owner_id)
        assert exc_info.value.message == "Cannot modify past events"
        store.update_event.assert_not_called()

    def test_changed_date_is_revalidated(self, service, store, owner_id, today):
        event = stored_event(owner_id, today + timedelta(days=10))
        store.get_event.return_value = event
        with pytest.raises(EventDateTooFarError):
            service.update_event(str(event.id), command_on(today + timedelta(days=400)), owner_id)

    def test_full_replacement_passed_to_store(self, service, store, owner_id, today):
        event = stored_event(owner_id, today)
        store.get_event.return_value = event
        command = command_on(today + timedelta(days=3))

        service.update_event(str(event.id), command, owner_id)

        store.update_event.assert_called_once_with(event.id, command)

    def test_unknown_event(self, service, store, owner_id, today):
        store.get_event.return_value = None
        with pytest.raises(EventNotFoundError):
            service.update_event(str(uuid.uuid4()), command_on(today), owner_id)


class TestDeleteEvent:
    def test_owner_deletes_upcoming_event(self, service, store, owner_id, today):
        event = stored_event(owner_id, today)
        store.get_event.return_value = event
        service.delete_event(str(event.id), owner_id)
        store.delete_event.assert_called_once_with(event.id)

    def test_other_principal_is_forbidden(self, service, store, owner_id, today):
        event = stored_event(owner_id, today + timedelta(days=1))
        store.get_event.return_value = event
        with pytest.raises(EventOwnershipError):
            service.delete_event(str(event.id), str(uuid.uuid4()))
        store.delete_event.assert_not_called()

    def test_past_event_is_locked_for_owner(self, service, store, owner_id, today):
        event = stored_event(owner_id, today - timedelta(days=30))
        store.get_event.return_value = event
        with pytest.raises(PastEventLockedError):
            service.delete_event(str(event.id), owner_id)

    def test_invalid_id_checked_before_store(self, service, store, owner_id):
        with pytest.raises(InvalidEventIdError):
            service.delete_event("42", owner_id)
        store.get_event.assert_not_called()


class TestListEvents:
    def test_passes_today_to_store(self, service, store, booking_config):
        store.list_events.return_value = ([], 0)
        criteria = EventListCriteria(upcoming_only=True)
        page = service.list_events(criteria, PageRequest())
        store.list_events.assert_called_once_with(criteria, PageRequest(), booking_config.today())
        assert page.total == 0
        assert not page.has_next
