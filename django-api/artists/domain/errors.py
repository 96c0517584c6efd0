"""Domain error codes for the artists module."""

from enum import Enum

from common.errors import DomainError, ErrorKind


class ErrorCode(Enum):
    """Domain error codes."""

    ARTIST_NOT_FOUND = "ARTIST_NOT_FOUND"
    INVALID_ARTIST_ID = "INVALID_ARTIST_ID"
    ARTIST_NAME_EXISTS = "ARTIST_NAME_EXISTS"
    PROFILE_EXISTS = "PROFILE_EXISTS"
    INVALID_MUSIC_STYLE_IDS = "INVALID_MUSIC_STYLE_IDS"
    ARTIST_OWNERSHIP = "ARTIST_OWNERSHIP"


class ArtistNotFoundError(DomainError):
    """Raised when an artist profile is not found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, artist_id: str) -> None:
        super().__init__(
            code=ErrorCode.ARTIST_NOT_FOUND,
            message="Artist not found",
        )
        self.artist_id = artist_id


class InvalidArtistIdError(DomainError):
    """Raised when an artist ID is invalid."""

    kind = ErrorKind.VALIDATION

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARTIST_ID,
            message="Invalid artist ID format",
        )


class ArtistNameTakenError(DomainError):
    """Raised when another artist already uses the display name."""

    kind = ErrorKind.CONFLICT

    def __init__(self, artist_name: str) -> None:
        super().__init__(
            code=ErrorCode.ARTIST_NAME_EXISTS,
            message="Artist name already exists",
        )
        self.artist_name = artist_name


class ProfileExistsError(DomainError):
    """Raised when the principal already owns a profile."""

    kind = ErrorKind.CONFLICT

    def __init__(self, artist_id: str) -> None:
        super().__init__(
            code=ErrorCode.PROFILE_EXISTS,
            message="User profile already exists",
        )
        self.artist_id = artist_id


class InvalidMusicStyleIdsError(DomainError):
    """Raised when some referenced music styles do not exist."""

    kind = ErrorKind.BUSINESS_LOGIC

    def __init__(self, missing_ids: list[str]) -> None:
        super().__init__(
            code=ErrorCode.INVALID_MUSIC_STYLE_IDS,
            message=f"Invalid music style IDs: {', '.join(missing_ids)}",
            details={"invalid_ids": missing_ids},
        )
        self.missing_ids = missing_ids


class ArtistOwnershipError(DomainError):
    """Raised when a principal tries to edit someone else's profile."""

    kind = ErrorKind.AUTHORIZATION

    def __init__(self, artist_id: str) -> None:
        super().__init__(
            code=ErrorCode.ARTIST_OWNERSHIP,
            message="Cannot modify other user's profile",
        )
        self.artist_id = artist_id
