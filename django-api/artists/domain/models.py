"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in artists/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from artists.domain.value_objects import ArtistId, MusicStyleId

if TYPE_CHECKING:
    from events.domain.models import Event


@dataclass(frozen=True)
class MusicStyle:
    """Domain representation of a MusicStyle."""

    id: MusicStyleId
    style_name: str
    created_at: datetime
    usage_count: int = 0


@dataclass(frozen=True)
class Artist:
    """Domain representation of an Artist profile."""

    id: ArtistId
    artist_name: str
    biography: str
    instagram_url: str | None
    facebook_url: str | None
    created_at: datetime
    updated_at: datetime
    music_styles: tuple[MusicStyle, ...] = ()


@dataclass(frozen=True)
class ArtistSummary:
    """Search result row."""

    artist: Artist
    upcoming_events_count: int


@dataclass(frozen=True)
class ArtistDetail:
    """Profile with events split at today; both buckets newest date first."""

    artist: Artist
    upcoming_events: tuple["Event", ...]
    past_events: tuple["Event", ...]


@dataclass(frozen=True)
class ProfileStatus:
    user_id: str
    is_complete: bool
    missing_fields: tuple[str, ...]


@dataclass(frozen=True)
class CreateArtistCommand:
    artist_name: str
    biography: str
    music_style_ids: tuple[MusicStyleId, ...]
    instagram_url: str | None = None
    facebook_url: str | None = None


@dataclass(frozen=True)
class UpdateArtistCommand:
    """Partial update. Only names listed in ``provided`` are changed."""

    artist_name: str | None = None
    biography: str | None = None
    instagram_url: str | None = None
    facebook_url: str | None = None
    music_style_ids: tuple[MusicStyleId, ...] | None = None
    provided: frozenset[str] = frozenset()

    def changes(self, field_name: str) -> bool:
        return field_name in self.provided
