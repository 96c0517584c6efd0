"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class MusicStyle(models.Model):
    """Reference data maintained through the admin."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    style_name = models.CharField(max_length=100, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "music_styles"
        ordering = ["style_name"]

    def __str__(self) -> str:
        return self.style_name


class Artist(models.Model):
    """Persistence model for DJ profiles.

    The primary key is the principal id issued by the identity provider, so a
    second profile for the same principal violates the primary key.
    """

    id = models.UUIDField(primary_key=True, editable=False)
    artist_name = models.CharField(max_length=255)
    biography = models.TextField()
    instagram_url = models.URLField(max_length=500, blank=True, null=True)
    facebook_url = models.URLField(max_length=500, blank=True, null=True)
    music_styles = models.ManyToManyField(
        MusicStyle, through="ArtistMusicStyle", related_name="artists"
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "artists"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(fields=["artist_name"], name="uq_artists_artist_name"),
        ]
        indexes = [
            models.Index(fields=["-created_at"], name="idx_artists_created_at"),
        ]

    def __str__(self) -> str:
        return self.artist_name


class ArtistMusicStyle(models.Model):
    """Association between an artist and one of their styles."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    artist = models.ForeignKey(Artist, on_delete=models.CASCADE, related_name="style_links")
    music_style = models.ForeignKey(
        MusicStyle, on_delete=models.CASCADE, related_name="artist_links"
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "artist_music_styles"
        constraints = [
            models.UniqueConstraint(
                fields=["artist", "music_style"], name="uq_artist_music_style"
            ),
        ]
        indexes = [
            models.Index(fields=["music_style"], name="idx_artist_styles_style"),
        ]

    def __str__(self) -> str:
        return f"{self.artist_id} - {self.music_style_id}"
