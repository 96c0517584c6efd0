"""Serializers for artist requests and responses."""

from typing import Any

from rest_framework import serializers

from artists.domain import (
    ArtistSearchCriteria,
    CreateArtistCommand,
    MusicStyleId,
    UpdateArtistCommand,
)
from common.validation import (
    CalendarDateField,
    CommaSeparatedIdsField,
    MusicStyleIdsField,
    PaginationQuerySerializer,
    check_date_range,
    filter_text_field,
    text_field,
)
from events.handlers.serializers import ArtistEventSerializer

PROFILE_TEXT_FIELDS = ("artist_name", "biography", "instagram_url", "facebook_url")


def social_url_field(label: str) -> serializers.URLField:
    """Optional profile link; blank or null clears it."""
    return serializers.URLField(
        max_length=500,
        required=False,
        allow_null=True,
        allow_blank=True,
        error_messages={
            "invalid": f"Invalid {label} URL",
            "max_length": f"{label} URL must be at most 500 characters",
        },
    )


def _style_ids(values: Any) -> tuple[MusicStyleId, ...]:
    return tuple(MusicStyleId(value) for value in values or ())


class CreateArtistSerializer(serializers.Serializer):
    """Body of POST /api/artists."""

    artist_name = text_field("Artist name", 255)
    biography = text_field("Biography", 10000)
    instagram_url = social_url_field("Instagram")
    facebook_url = social_url_field("Facebook")
    music_style_ids = MusicStyleIdsField()

    @staticmethod
    def build_command(data: dict[str, Any]) -> CreateArtistCommand:
        return CreateArtistCommand(
            artist_name=data["artist_name"],
            biography=data["biography"],
            music_style_ids=_style_ids(data["music_style_ids"]),
            instagram_url=data.get("instagram_url") or None,
            facebook_url=data.get("facebook_url") or None,
        )


class UpdateArtistSerializer(serializers.Serializer):
    """Body of PUT /api/artists/{id}. Every field is optional."""

    artist_name = text_field("Artist name", 255, required=False)
    biography = text_field("Biography", 10000, required=False)
    instagram_url = social_url_field("Instagram")
    facebook_url = social_url_field("Facebook")
    music_style_ids = MusicStyleIdsField(required=False)

    @staticmethod
    def build_command(data: dict[str, Any]) -> UpdateArtistCommand:
        values = {field: data.get(field) or None for field in PROFILE_TEXT_FIELDS}
        music_style_ids = data.get("music_style_ids")
        return UpdateArtistCommand(
            **values,
            music_style_ids=_style_ids(music_style_ids) if music_style_ids is not None else None,
            provided=frozenset(data),
        )


class ArtistSearchQuerySerializer(PaginationQuerySerializer):
    """Query string of GET /api/artists."""

    search = filter_text_field("Search", 255)
    music_styles = CommaSeparatedIdsField()
    location = filter_text_field("Location", 255)
    available_from = CalendarDateField(required=False)
    available_to = CalendarDateField(required=False)

    def validate(self, attrs: dict) -> dict:
        check_date_range(attrs, "available_from", "available_to")
        return attrs

    @staticmethod
    def build_criteria(data: dict[str, Any]) -> ArtistSearchCriteria:
        return ArtistSearchCriteria(
            search=data.get("search") or None,
            music_style_ids=_style_ids(data.get("music_styles")),
            location=data.get("location") or None,
            available_from=data.get("available_from"),
            available_to=data.get("available_to"),
        )


class MusicStyleRefSerializer(serializers.Serializer):
    id = serializers.CharField()
    style_name = serializers.CharField()


class MusicStyleSerializer(MusicStyleRefSerializer):
    """Reference list row with the number of artists using the style."""

    usage_count = serializers.IntegerField()
    created_at = serializers.DateTimeField()


class ArtistSerializer(serializers.Serializer):
    """Serializer for Artist domain model."""

    id = serializers.CharField()
    artist_name = serializers.CharField()
    biography = serializers.CharField()
    instagram_url = serializers.CharField(allow_null=True)
    facebook_url = serializers.CharField(allow_null=True)
    music_styles = MusicStyleRefSerializer(many=True)
    created_at = serializers.DateTimeField()
    updated_at = serializers.DateTimeField()


class ArtistSummarySerializer(serializers.Serializer):
    """Search row: the profile plus its upcoming event count."""

    def to_representation(self, instance):
        data = ArtistSerializer(instance.artist).data
        data["upcoming_events_count"] = instance.upcoming_events_count
        return data


class ArtistDetailSerializer(serializers.Serializer):
    def to_representation(self, instance):
        data = ArtistSerializer(instance.artist).data
        data["events"] = {
            "upcoming": ArtistEventSerializer(instance.upcoming_events, many=True).data,
            "past": ArtistEventSerializer(instance.past_events, many=True).data,
        }
        return data


class ProfileStatusSerializer(serializers.Serializer):
    user_id = serializers.CharField()
    is_complete = serializers.BooleanField()
    missing_fields = serializers.ListField(child=serializers.CharField())
