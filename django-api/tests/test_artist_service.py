"""Unit tests for ArtistService.

These test error handling and domain error mapping against a mocked store.
Run with: pytest tests/test_artist_service.py -v
"""

import uuid
from datetime import date, datetime, timedelta, timezone
from unittest.mock import Mock

import pytest

from artists.domain import (
    Artist,
    ArtistId,
    ArtistSearchCriteria,
    CreateArtistCommand,
    MusicStyle,
    MusicStyleId,
    UpdateArtistCommand,
)
from artists.domain.errors import (
    ArtistNameTakenError,
    ArtistNotFoundError,
    ArtistOwnershipError,
    InvalidArtistIdError,
    InvalidMusicStyleIdsError,
    ProfileExistsError,
)
from artists.services.artist_service import ArtistService
from artists.stores.interfaces import ArtistStore
from common.pagination import PageRequest
from events.domain import Event, EventId

STAMP = datetime(2025, 1, 1, tzinfo=timezone.utc)


def build_artist(artist_id: ArtistId, name: str = "DJ Nova", styles=None) -> Artist:
    if styles is None:
        styles = (MusicStyle(id=MusicStyleId(uuid.uuid4()), style_name="Techno", created_at=STAMP),)
    return Artist(
        id=artist_id,
        artist_name=name,
        biography="Resident DJ",
        instagram_url=None,
        facebook_url=None,
        created_at=STAMP,
        updated_at=STAMP,
        music_styles=styles,
    )


def build_event(owner_id: ArtistId, event_date: date) -> Event:
    return Event(
        id=EventId(uuid.uuid4()),
        owner_id=owner_id,
        event_name="Warehouse Night",
        country="Poland",
        city="Warsaw",
        venue_name="Smolna",
        event_date=event_date,
        event_time=None,
        created_at=STAMP,
        updated_at=STAMP,
    )


@pytest.fixture
def store() -> Mock:
    mock = Mock(spec=ArtistStore)
    mock.artist_exists.return_value = False
    mock.artist_name_taken.return_value = False
    mock.find_missing_music_styles.return_value = []
    return mock


@pytest.fixture
def service(store, booking_config) -> ArtistService:
    return ArtistService(store, booking_config)


@pytest.fixture
def principal_id() -> str:
    return str(uuid.uuid4())


def create_command(**overrides) -> CreateArtistCommand:
    values = {
        "artist_name": "DJ Nova",
        "biography": "Resident DJ",
        "music_style_ids": (MusicStyleId(uuid.uuid4()),),
    }
    values.update(overrides)
    return CreateArtistCommand(**values)


class TestCreateArtist:
    def test_creates_profile_under_principal_id(self, service, store, principal_id):
        command = create_command()
        store.create_artist.return_value = build_artist(ArtistId.from_string(principal_id))

        artist = service.create_artist(command, principal_id)

        store.create_artist.assert_called_once_with(ArtistId.from_string(principal_id), command)
        assert str(artist.id) == principal_id

    def test_invalid_principal_id_raises_error(self, service, store):
        with pytest.raises(InvalidArtistIdError):
            service.create_artist(create_command(), "user-42")
        store.create_artist.assert_not_called()

    def test_second_profile_for_principal_conflicts(self, service, store, principal_id):
        store.artist_exists.return_value = True
        with pytest.raises(ProfileExistsError) as exc_info:
            service.create_artist(create_command(), principal_id)
        assert exc_info.value.status == 409
        store.create_artist.assert_not_called()

    def test_taken_name_conflicts(self, service, store, principal_id):
        store.artist_name_taken.return_value = True
        with pytest.raises(ArtistNameTakenError) as exc_info:
            service.create_artist(create_command(), principal_id)
        assert exc_info.value.message == "Artist name already exists"
        store.artist_name_taken.assert_called_once_with("DJ Nova")

    def test_unknown_music_styles_are_listed(self, service, store, principal_id):
        missing = MusicStyleId(uuid.uuid4())
        store.find_missing_music_styles.return_value = [missing]
        with pytest.raises(InvalidMusicStyleIdsError) as exc_info:
            service.create_artist(create_command(music_style_ids=(missing,)), principal_id)
        assert exc_info.value.details == {"invalid_ids": [str(missing)]}
        assert exc_info.value.message == f"Invalid music style IDs: {missing}"
        assert exc_info.value.status == 400


class TestUpdateArtist:
    def test_other_principal_is_forbidden(self, service, store, principal_id):
        target = str(uuid.uuid4())
        with pytest.raises(ArtistOwnershipError) as exc_info:
            service.update_artist(target, UpdateArtistCommand(), principal_id)
        assert exc_info.value.status == 403
        store.get_artist.assert_not_called()

    def test_missing_profile_raises_not_found(self, service, store, principal_id):
        store.get_artist.return_value = None
        with pytest.raises(ArtistNotFoundError):
            service.update_artist(principal_id, UpdateArtistCommand(), principal_id)

    def test_invalid_target_id_raises_error(self, service, principal_id):
        with pytest.raises(InvalidArtistIdError):
            service.update_artist("nope", UpdateArtistCommand(), principal_id)

    def test_unchanged_name_skips_uniqueness_check(self, service, store, principal_id):
        artist_id = ArtistId.from_string(principal_id)
        store.get_artist.return_value = build_artist(artist_id, name="DJ Nova")
        store.update_artist.return_value = build_artist(artist_id, name="DJ Nova")
        command = UpdateArtistCommand(artist_name="DJ Nova", provided=frozenset({"artist_name"}))

        service.update_artist(principal_id, command, principal_id)

        store.artist_name_taken.assert_not_called()

    def test_new_name_checked_against_other_artists(self, service, store, principal_id):
        artist_id = ArtistId.from_string(principal_id)
        store.get_artist.return_value = build_artist(artist_id, name="DJ Nova")
        store.artist_name_taken.return_value = True
        command = UpdateArtistCommand(artist_name="DJ Vega", provided=frozenset({"artist_name"}))

        with pytest.raises(ArtistNameTakenError):
            service.update_artist(principal_id, command, principal_id)
        store.artist_name_taken.assert_called_once_with("DJ Vega", exclude_id=artist_id)
        store.update_artist.assert_not_called()

    def test_replacement_styles_are_validated(self, service, store, principal_id):
        artist_id = ArtistId.from_string(principal_id)
        store.get_artist.return_value = build_artist(artist_id)
        unknown = MusicStyleId(uuid.uuid4())
        store.find_missing_music_styles.return_value = [unknown]
        command = UpdateArtistCommand(
            music_style_ids=(unknown,), provided=frozenset({"music_style_ids"})
        )

        with pytest.raises(InvalidMusicStyleIdsError):
            service.update_artist(principal_id, command, principal_id)
        store.update_artist.assert_not_called()


class TestGetArtist:
    def test_events_split_at_today(self, service, store, booking_config, principal_id):
        artist_id = ArtistId.from_string(principal_id)
        today = booking_config.today()
        upcoming = [build_event(artist_id, today + timedelta(days=30)), build_event(artist_id, today)]
        past = [build_event(artist_id, today - timedelta(days=1))]
        store.get_artist.return_value = build_artist(artist_id)
        store.list_events_for_artist.return_value = upcoming + past

        detail = service.get_artist(principal_id)

        assert list(detail.upcoming_events) == upcoming
        assert list(detail.past_events) == past

    def test_unknown_artist_raises_not_found(self, service, store, principal_id):
        store.get_artist.return_value = None
        with pytest.raises(ArtistNotFoundError):
            service.get_artist(principal_id)

    def test_invalid_id_never_reaches_store(self, service, store):
        with pytest.raises(InvalidArtistIdError):
            service.get_artist("123")
        store.get_artist.assert_not_called()


class TestSearchArtists:
    def test_wraps_rows_in_page(self, service, store, booking_config):
        store.search_artists.return_value = ([], 41)
        criteria = ArtistSearchCriteria(search="nova")
        page_request = PageRequest(page=2, limit=20)

        page = service.search_artists(criteria, page_request)

        store.search_artists.assert_called_once_with(criteria, page_request, booking_config.today())
        assert page.total_pages == 3
        assert page.has_next
        assert page.has_prev


class TestProfileStatus:
    def test_missing_profile(self, service, store, principal_id):
        store.get_artist.return_value = None
        status = service.get_profile_status(principal_id)
        assert not status.is_complete
        assert status.missing_fields == ("artist_name", "biography")
        assert status.user_id == principal_id

    def test_profile_without_styles(self, service, store, principal_id):
        store.get_artist.return_value = build_artist(ArtistId.from_string(principal_id), styles=())
        status = service.get_profile_status(principal_id)
        assert status.missing_fields == ("music_styles",)

    def test_complete_profile(self, service, store, principal_id):
        store.get_artist.return_value = build_artist(ArtistId.from_string(principal_id))
        assert service.get_profile_status(principal_id).is_complete
