"""Pytest configuration and shared fixtures."""

import uuid
from datetime import date, time

import pytest
import structlog
from django.utils import timezone
from rest_framework.test import APIClient

from artists.models import Artist, ArtistMusicStyle, MusicStyle
from common.authentication import issue_principal_token
from common.config import BookingConfig, get_booking_config
from events.models import Event

FIXED_TODAY = date(2025, 6, 15)


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True, scope="session")
def uncached_loggers():
    """Let structlog.testing.capture_logs see loggers that already logged."""
    structlog.configure(cache_logger_on_first_use=False)


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def booking_config() -> BookingConfig:
    """Service configuration with a clock pinned to FIXED_TODAY."""
    return BookingConfig(clock=lambda: FIXED_TODAY)


@pytest.fixture
def today() -> date:
    """The date the API views consider today."""
    return timezone.localdate()


@pytest.fixture
def auth_client():
    """Build an APIClient authenticated as the given principal id."""

    def _client(principal_id) -> APIClient:
        client = APIClient()
        token = issue_principal_token(str(principal_id), get_booking_config())
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
        return client

    return _client


@pytest.fixture
def music_styles(db) -> list[MusicStyle]:
    return [
        MusicStyle.objects.create(style_name=name)
        for name in ("Drum and Bass", "House", "Techno")
    ]


@pytest.fixture
def make_artist(db):
    """Create an artist row, optionally linked to styles."""

    def _make(artist_name: str = "DJ Nova", styles=(), artist_id=None, **fields) -> Artist:
        artist = Artist.objects.create(
            id=artist_id or uuid.uuid4(),
            artist_name=artist_name,
            biography=fields.pop("biography", f"{artist_name} plays all night long"),
            **fields,
        )
        ArtistMusicStyle.objects.bulk_create(
            [ArtistMusicStyle(artist=artist, music_style=style) for style in styles]
        )
        return artist

    return _make


@pytest.fixture
def make_event(db):
    """Create an event row owned by ``artist`` on ``event_date``."""

    def _make(artist: Artist, event_date: date, **fields) -> Event:
        values = {
            "event_name": "Warehouse Night",
            "country": "Poland",
            "city": "Warsaw",
            "venue_name": "Smolna",
            "event_time": time(22, 0),
        }
        values.update(fields)
        return Event.objects.create(artist=artist, event_date=event_date, **values)

    return _make
