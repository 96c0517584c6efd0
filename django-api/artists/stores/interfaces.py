"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date

from artists.domain import (
    Artist,
    ArtistId,
    ArtistSearchCriteria,
    ArtistSummary,
    CreateArtistCommand,
    MusicStyle,
    MusicStyleId,
    UpdateArtistCommand,
)
from common.pagination import PageRequest
from events.domain import Event


class ArtistStore(ABC):
    """Interface for artist profile persistence operations."""

    @abstractmethod
    def get_artist(self, artist_id: ArtistId) -> Artist | None:
        """Return an artist with its music styles, or None if not found."""
        ...

    @abstractmethod
    def artist_exists(self, artist_id: ArtistId) -> bool:
        """Check if a profile exists for the principal."""
        ...

    @abstractmethod
    def artist_name_taken(self, artist_name: str, exclude_id: ArtistId | None = None) -> bool:
        """Case-sensitive exact match against every other artist's name."""
        ...

    @abstractmethod
    def find_missing_music_styles(self, style_ids: tuple[MusicStyleId, ...]) -> list[MusicStyleId]:
        """Return the ids that do not exist, in input order."""
        ...

    @abstractmethod
    def create_artist(self, artist_id: ArtistId, command: CreateArtistCommand) -> Artist:
        """Insert the profile and its style links as one unit.

        Raises:
            ArtistNameTakenError / ProfileExistsError: On a uniqueness violation.
            PersistenceError: On any other store failure.
        """
        ...

    @abstractmethod
    def update_artist(self, artist_id: ArtistId, command: UpdateArtistCommand) -> Artist:
        """Apply the provided fields; replace the style links if given."""
        ...

    @abstractmethod
    def search_artists(
        self, criteria: ArtistSearchCriteria, page: PageRequest, today: date
    ) -> tuple[list[ArtistSummary], int]:
        """Return one page of matches, newest profile first, plus the total count."""
        ...

    @abstractmethod
    def list_events_for_artist(self, artist_id: ArtistId) -> list[Event]:
        """Return the artist's events ordered by event_date descending."""
        ...

    @abstractmethod
    def list_music_styles(self) -> list[MusicStyle]:
        """Return all styles ordered by name, with usage counts."""
        ...
