"""Unit tests for domain primitives.

These test invariants that must hold at construction time.
Run with: pytest tests/test_domain.py -v
"""

import uuid
from datetime import date, datetime, timezone

import pytest

from artists.domain import ArtistId, ArtistSearchCriteria, MusicStyleId, UpdateArtistCommand
from common.config import BookingConfig
from common.errors import ErrorKind, PersistenceError, ValidationFailed, status_for_kind
from common.pagination import Page, PageRequest
from events.domain import Event, EventId, EventListCriteria
from events.services.event_service import one_year_after

VALID_UUID = "3f2b8c1e-9d4a-4b6f-8e2a-1c5d7f9a0b3e"


class TestIdentifiers:
    """Tests for ArtistId, MusicStyleId and EventId."""

    @pytest.mark.parametrize("id_type", [ArtistId, MusicStyleId, EventId])
    def test_from_string_valid_uuid(self, id_type):
        """from_string parses a canonical UUID."""
        parsed = id_type.from_string(VALID_UUID)
        assert parsed.value == uuid.UUID(VALID_UUID)
        assert str(parsed) == VALID_UUID

    @pytest.mark.parametrize(
        "raw",
        [
            "not-a-uuid",
            "",
            "3f2b8c1e9d4a4b6f8e2a1c5d7f9a0b3e",
            "3f2b8c1e-9d4a-4b6f-8e2a-1c5d7f9a0b3",
            "{3f2b8c1e-9d4a-4b6f-8e2a-1c5d7f9a0b3e}",
        ],
    )
    def test_from_string_invalid_uuid(self, raw):
        """from_string raises ValueError for anything but the 8-4-4-4-12 shape."""
        with pytest.raises(ValueError):
            EventId.from_string(raw)

    def test_ids_compare_by_value(self):
        assert ArtistId.from_string(VALID_UUID) == ArtistId.from_string(VALID_UUID.upper())


class TestSearchCriteria:
    """Tests for ArtistSearchCriteria and EventListCriteria."""

    def test_artist_criteria_rejects_inverted_window(self):
        with pytest.raises(ValueError, match="available_from"):
            ArtistSearchCriteria(available_from=date(2025, 7, 2), available_to=date(2025, 7, 1))

    def test_artist_criteria_accepts_single_day_window(self):
        criteria = ArtistSearchCriteria(
            available_from=date(2025, 7, 1), available_to=date(2025, 7, 1)
        )
        assert criteria.filters_availability

    def test_artist_criteria_open_window(self):
        """Either side of the availability window may be open."""
        assert ArtistSearchCriteria(available_to=date(2025, 7, 1)).filters_availability
        assert not ArtistSearchCriteria(search="nova").filters_availability

    def test_event_criteria_rejects_inverted_range(self):
        with pytest.raises(ValueError, match="date_from"):
            EventListCriteria(date_from=date(2025, 8, 1), date_to=date(2025, 7, 1))

    def test_criteria_are_immutable(self):
        criteria = EventListCriteria(city="Berlin")
        with pytest.raises(AttributeError):
            criteria.city = "Paris"


class TestPagination:
    """Tests for PageRequest and Page."""

    def test_page_must_be_positive(self):
        with pytest.raises(ValueError, match="Page must be a positive integer"):
            PageRequest(page=0)

    def test_build_uses_configured_default(self):
        config = BookingConfig(default_page_size=25)
        assert PageRequest.build(None, None, config) == PageRequest(page=1, limit=25)

    @pytest.mark.parametrize("requested, expected", [(0, 1), (-5, 1), (50, 50), (500, 100)])
    def test_build_clamps_limit(self, requested, expected):
        assert PageRequest.build(2, requested, BookingConfig()).limit == expected

    def test_offset(self):
        assert PageRequest(page=3, limit=20).offset == 40

    @pytest.mark.parametrize(
        "page, limit, total, has_next",
        [(1, 20, 0, False), (1, 20, 20, False), (1, 20, 21, True), (2, 10, 25, True), (3, 10, 25, False)],
    )
    def test_has_next_iff_more_rows_remain(self, page, limit, total, has_next):
        result = Page(items=(), page=page, limit=limit, total=total)
        assert result.has_next is has_next
        assert result.has_next == (page * limit < total)

    def test_pagination_envelope(self):
        result = Page(items=("a", "b"), page=2, limit=2, total=5)
        assert result.pagination() == {
            "page": 2,
            "limit": 2,
            "total": 5,
            "total_pages": 3,
            "has_next": True,
            "has_prev": True,
        }

    def test_empty_result_has_zero_pages(self):
        assert Page(items=(), page=1, limit=20, total=0).total_pages == 0


class TestBookingConfig:
    def test_default_page_size_must_fit_maximum(self):
        with pytest.raises(ValueError):
            BookingConfig(default_page_size=200, max_page_size=100)

    def test_from_settings_reads_overrides(self):
        config = BookingConfig.from_settings({"MAX_PAGE_SIZE": "50", "DEFAULT_PAGE_SIZE": 10})
        assert config.max_page_size == 50
        assert config.default_page_size == 10
        assert config.error_body_max_chars == 2000

    def test_clock_is_injectable(self):
        assert BookingConfig(clock=lambda: date(2030, 1, 1)).today() == date(2030, 1, 1)


class TestOneYearHorizon:
    def test_same_day_next_year(self):
        assert one_year_after(date(2025, 6, 15)) == date(2026, 6, 15)

    def test_leap_day_maps_to_february_28(self):
        assert one_year_after(date(2028, 2, 29)) == date(2029, 2, 28)


class TestDomainModels:
    def test_event_is_past_only_before_today(self):
        stamp = datetime(2025, 1, 1, tzinfo=timezone.utc)
        event = Event(
            id=EventId.from_string(VALID_UUID),
            owner_id=ArtistId(uuid.uuid4()),
            event_name="Sunrise Set",
            country="Spain",
            city="Ibiza",
            venue_name="Amnesia",
            event_date=date(2025, 6, 15),
            event_time=None,
            created_at=stamp,
            updated_at=stamp,
        )
        assert not event.is_past(date(2025, 6, 15))
        assert event.is_past(date(2025, 6, 16))

    def test_update_command_tracks_provided_fields(self):
        command = UpdateArtistCommand(instagram_url=None, provided=frozenset({"instagram_url"}))
        assert command.changes("instagram_url")
        assert not command.changes("artist_name")


class TestErrorTaxonomy:
    @pytest.mark.parametrize(
        "kind, status",
        [
            (ErrorKind.VALIDATION, 400),
            (ErrorKind.BUSINESS_LOGIC, 400),
            (ErrorKind.AUTHENTICATION, 401),
            (ErrorKind.AUTHORIZATION, 403),
            (ErrorKind.NOT_FOUND, 404),
            (ErrorKind.CONFLICT, 409),
            (ErrorKind.DATABASE, 500),
            (ErrorKind.EXTERNAL_API, 500),
            (ErrorKind.INTERNAL, 500),
        ],
    )
    def test_status_per_kind(self, kind, status):
        assert status_for_kind(kind) == status

    def test_validation_failed_carries_violations(self):
        violations = [{"field": "artist_name", "message": "Artist name is required"}]
        error = ValidationFailed(violations)
        assert error.status == 400
        assert error.details == violations
        assert str(error) == "VALIDATION_ERROR: Validation failed"

    def test_persistence_error_keeps_operation(self):
        error = PersistenceError("create user", RuntimeError("connection reset"))
        assert error.message == "Failed to create user: connection reset"
        assert error.status == 500
