from django.urls import path

from artists.handlers import (
    ArtistDetailView,
    ArtistListView,
    MusicStyleListView,
    ProfileStatusView,
)

urlpatterns = [
    path("artists", ArtistListView.as_view(), name="artist-list"),
    path("artists/<str:artist_id>", ArtistDetailView.as_view(), name="artist-detail"),
    path("music-styles", MusicStyleListView.as_view(), name="music-style-list"),
    path("auth/profile-status", ProfileStatusView.as_view(), name="profile-status"),
]
