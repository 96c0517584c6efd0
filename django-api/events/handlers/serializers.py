"""Serializers for event requests and responses.

Input serializers validate and normalize payloads into commands and criteria;
output serializers render Event domain models.
"""

from typing import Any

from rest_framework import serializers

from artists.domain.value_objects import ArtistId
from common.validation import (
    CalendarDateField,
    OpaqueIdField,
    PaginationQuerySerializer,
    TimeOfDayField,
    check_date_range,
    filter_text_field,
    text_field,
)
from events.domain import EventCommand, EventListCriteria


class EventInputSerializer(serializers.Serializer):
    """Body of POST /api/events and PUT /api/events/{id}.

    Updates replace every field, so both use the same schema.
    """

    event_name = text_field("Event name", 10000)
    country = text_field("Country", 100)
    city = text_field("City", 100)
    venue_name = text_field("Venue name", 200)
    event_date = CalendarDateField(
        error_messages={"required": "Event date is required", "null": "Event date is required"}
    )
    event_time = TimeOfDayField(required=False, allow_null=True)

    @staticmethod
    def build_command(data: dict[str, Any]) -> EventCommand:
        return EventCommand(
            event_name=data["event_name"],
            country=data["country"],
            city=data["city"],
            venue_name=data["venue_name"],
            event_date=data["event_date"],
            event_time=data.get("event_time"),
        )


class EventListQuerySerializer(PaginationQuerySerializer):
    """Query string of GET /api/events."""

    user_id = OpaqueIdField(required=False, error_messages={"invalid": "Invalid user ID format"})
    country = filter_text_field("Country", 100)
    city = filter_text_field("City", 100)
    venue = filter_text_field("Venue", 200)
    date_from = CalendarDateField(required=False)
    date_to = CalendarDateField(required=False)
    upcoming_only = serializers.BooleanField(required=False, default=False)

    def validate(self, attrs: dict) -> dict:
        check_date_range(attrs, "date_from", "date_to")
        return attrs

    @staticmethod
    def build_criteria(data: dict[str, Any]) -> EventListCriteria:
        user_id = data.get("user_id")
        return EventListCriteria(
            user_id=ArtistId(user_id) if user_id else None,
            country=data.get("country") or None,
            city=data.get("city") or None,
            venue=data.get("venue") or None,
            date_from=data.get("date_from"),
            date_to=data.get("date_to"),
            upcoming_only=data.get("upcoming_only", False),
        )


class EventOwnerSerializer(serializers.Serializer):
    id = serializers.CharField()
    artist_name = serializers.CharField()


class EventSerializer(serializers.Serializer):
    """Serializer for Event domain model."""

    id = serializers.CharField()
    user_id = serializers.CharField(source="owner_id")
    event_name = serializers.CharField()
    country = serializers.CharField()
    city = serializers.CharField()
    venue_name = serializers.CharField()
    event_date = serializers.DateField()
    event_time = TimeOfDayField()
    user = EventOwnerSerializer(source="owner", required=False)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ArtistEventSerializer(serializers.Serializer):
    """Event row nested under an artist profile; the owner is implied."""

    id = serializers.CharField()
    event_name = serializers.CharField()
    country = serializers.CharField()
    city = serializers.CharField()
    venue_name = serializers.CharField()
    event_date = serializers.DateField()
    event_time = TimeOfDayField()
