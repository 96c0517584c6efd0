"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in events/models.py (persistence layer).
"""

from dataclasses import dataclass
from datetime import date, datetime, time

from artists.domain.value_objects import ArtistId
from events.domain.value_objects import EventId


@dataclass(frozen=True)
class EventOwner:
    """Denormalized summary of the artist who owns an event."""

    id: ArtistId
    artist_name: str


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId
    owner_id: ArtistId
    event_name: str
    country: str
    city: str
    venue_name: str
    event_date: date
    event_time: time | None
    created_at: datetime
    updated_at: datetime
    owner: EventOwner | None = None

    def is_past(self, today: date) -> bool:
        return self.event_date < today


@dataclass(frozen=True)
class EventCommand:
    """Validated, trimmed event fields for create and full-replacement update."""

    event_name: str
    country: str
    city: str
    venue_name: str
    event_date: date
    event_time: time | None = None
