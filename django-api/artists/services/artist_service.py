"""Artist service - all business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import structlog

from artists.domain import (
    Artist,
    ArtistDetail,
    ArtistId,
    ArtistSearchCriteria,
    ArtistSummary,
    CreateArtistCommand,
    MusicStyle,
    MusicStyleId,
    ProfileStatus,
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
from artists.stores.interfaces import ArtistStore
from common.config import BookingConfig
from common.pagination import Page, PageRequest

logger = structlog.get_logger(__name__)


class ArtistService:
    """Service for artist profiles, search and the music style reference list."""

    def __init__(self, store: ArtistStore, config: BookingConfig) -> None:
        self._store = store
        self._config = config

    def create_artist(self, command: CreateArtistCommand, principal_id: str) -> Artist:
        """Create the caller's profile.

        Raises:
            InvalidArtistIdError: If the principal id is not a valid UUID.
            ProfileExistsError: If the principal already has a profile.
            ArtistNameTakenError: If another artist uses the same name.
            InvalidMusicStyleIdsError: If any style id is unknown.
        """
        artist_id = self._parse_id(principal_id)

        if self._store.artist_exists(artist_id):
            raise ProfileExistsError(str(artist_id))
        if self._store.artist_name_taken(command.artist_name):
            raise ArtistNameTakenError(command.artist_name)
        self._check_music_styles(command.music_style_ids)

        artist = self._store.create_artist(artist_id, command)
        logger.info(
            "artist_created",
            artist_id=str(artist_id),
            music_style_count=len(command.music_style_ids),
        )
        return artist

    def update_artist(
        self, artist_id: str, command: UpdateArtistCommand, principal_id: str
    ) -> Artist:
        """Apply a partial update to the caller's own profile.

        Ownership is checked before existence, so a caller editing someone
        else's id gets an authorization error whether or not it exists.

        Raises:
            InvalidArtistIdError: If ``artist_id`` is not a valid UUID.
            ArtistOwnershipError: If the caller does not own ``artist_id``.
            ArtistNotFoundError: If no profile exists for ``artist_id``.
            ArtistNameTakenError: If the new name belongs to another artist.
            InvalidMusicStyleIdsError: If any replacement style id is unknown.
        """
        target = self._parse_id(artist_id)
        if not self._is_owner(target, principal_id):
            raise ArtistOwnershipError(str(target))

        current = self._store.get_artist(target)
        if current is None:
            raise ArtistNotFoundError(str(target))

        if (
            command.changes("artist_name")
            and command.artist_name != current.artist_name
            and self._store.artist_name_taken(command.artist_name, exclude_id=target)
        ):
            raise ArtistNameTakenError(command.artist_name)
        if command.music_style_ids is not None:
            self._check_music_styles(command.music_style_ids)

        artist = self._store.update_artist(target, command)
        logger.info(
            "artist_updated",
            artist_id=str(target),
            fields=sorted(command.provided),
        )
        return artist

    def get_artist(self, artist_id: str) -> ArtistDetail:
        """Return the profile with its events split at today.

        Raises:
            InvalidArtistIdError: If the artist_id is not a valid UUID.
            ArtistNotFoundError: If the artist does not exist.
        """
        target = self._parse_id(artist_id)
        artist = self._store.get_artist(target)
        if artist is None:
            raise ArtistNotFoundError(str(target))

        today = self._config.today()
        events = self._store.list_events_for_artist(target)
        return ArtistDetail(
            artist=artist,
            upcoming_events=tuple(event for event in events if not event.is_past(today)),
            past_events=tuple(event for event in events if event.is_past(today)),
        )

    def search_artists(
        self, criteria: ArtistSearchCriteria, page: PageRequest
    ) -> Page[ArtistSummary]:
        rows, total = self._store.search_artists(criteria, page, self._config.today())
        return Page.from_request(rows, total, page)

    def list_music_styles(self) -> list[MusicStyle]:
        return self._store.list_music_styles()

    def get_profile_status(self, principal_id: str) -> ProfileStatus:
        """Report which required profile fields the caller still has to fill in."""
        artist_id = self._parse_id(principal_id)
        artist = self._store.get_artist(artist_id)
        if artist is None:
            return ProfileStatus(
                user_id=str(artist_id),
                is_complete=False,
                missing_fields=("artist_name", "biography"),
            )

        missing = []
        if not artist.artist_name.strip():
            missing.append("artist_name")
        if not artist.biography.strip():
            missing.append("biography")
        if not artist.music_styles:
            missing.append("music_styles")
        return ProfileStatus(
            user_id=str(artist_id),
            is_complete=not missing,
            missing_fields=tuple(missing),
        )

    def _check_music_styles(self, style_ids: tuple[MusicStyleId, ...]) -> None:
        missing = self._store.find_missing_music_styles(style_ids)
        if missing:
            raise InvalidMusicStyleIdsError([str(style_id) for style_id in missing])

    @staticmethod
    def _parse_id(value: str) -> ArtistId:
        try:
            return ArtistId.from_string(str(value))
        except ValueError as exc:
            raise InvalidArtistIdError() from exc

    @staticmethod
    def _is_owner(target: ArtistId, principal_id: str) -> bool:
        try:
            return ArtistId.from_string(str(principal_id)) == target
        except ValueError:
            return False
