from artists.domain.models import (
    Artist,
    ArtistDetail,
    ArtistSummary,
    CreateArtistCommand,
    MusicStyle,
    ProfileStatus,
    UpdateArtistCommand,
)
from artists.domain.value_objects import ArtistId, ArtistSearchCriteria, MusicStyleId

__all__ = [
    "Artist",
    "ArtistDetail",
    "ArtistSummary",
    "CreateArtistCommand",
    "MusicStyle",
    "ProfileStatus",
    "UpdateArtistCommand",
    "ArtistId",
    "ArtistSearchCriteria",
    "MusicStyleId",
]
