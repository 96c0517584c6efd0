"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class Event(models.Model):
    """Persistence model for events owned by an artist."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    artist = models.ForeignKey(
        "artists.Artist",
        on_delete=models.CASCADE,
        related_name="events",
        db_column="user_id",
    )
    event_name = models.TextField()
    country = models.CharField(max_length=100)
    city = models.CharField(max_length=100)
    venue_name = models.CharField(max_length=200)
    event_date = models.DateField()
    event_time = models.TimeField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "events"
        ordering = ["-event_date", "-created_at"]
        indexes = [
            models.Index(fields=["-event_date", "-created_at"], name="idx_events_date"),
            models.Index(fields=["artist", "event_date"], name="idx_events_artist_date"),
        ]

    def __str__(self) -> str:
        return f"{self.event_name} - {self.event_date}"
