from artists.handlers.views import (
    ArtistDetailView,
    ArtistListView,
    MusicStyleListView,
    ProfileStatusView,
)

__all__ = ["ArtistDetailView", "ArtistListView", "MusicStyleListView", "ProfileStatusView"]
