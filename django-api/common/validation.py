"""Validation layer built on DRF serializers.

Serializers trim and bound strings, check id/date/time shapes and run
cross-field rules once every field is valid. ``validate_payload`` turns the
DRF error tree into the flat, ordered ``{"field", "message"}`` list carried by
``ValidationFailed``. Nothing in here touches the database.

``PasswordUpdateSerializer`` is the schema for password changes; the change
itself is handled by the identity provider, not by this service.
"""

import re
from datetime import date, time
from typing import Any
from uuid import UUID

from rest_framework import serializers

from common.errors import ValidationFailed
from common.identifiers import is_valid_uuid

MAX_MUSIC_STYLES = 50

DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")
TIME_PATTERN = re.compile(r"([01]?[0-9]|2[0-3]):[0-5][0-9]")
PASSWORD_PATTERN = re.compile(r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)")


def flatten_errors(errors: Any, prefix: str = "") -> list[dict[str, str]]:
    """Flatten ``serializer.errors`` into ``[{"field": "a.b", "message": ...}]``."""
    violations: list[dict[str, str]] = []
    if isinstance(errors, dict):
        for key, value in errors.items():
            field = f"{prefix}.{key}" if prefix else str(key)
            violations.extend(flatten_errors(value, field))
    elif isinstance(errors, (list, tuple)):
        for item in errors:
            if isinstance(item, (dict, list, tuple)):
                violations.extend(flatten_errors(item, prefix))
            else:
                violations.append({"field": prefix or "non_field_errors", "message": str(item)})
    else:
        violations.append({"field": prefix or "non_field_errors", "message": str(errors)})
    return violations


def validate_payload(serializer_class: type[serializers.Serializer], data: Any, **kwargs: Any) -> dict:
    """Run a serializer and return ``validated_data``.

    Raises:
        ValidationFailed: With every violation found, not just the first.
    """
    serializer = serializer_class(data=data, **kwargs)
    if not serializer.is_valid():
        raise ValidationFailed(flatten_errors(serializer.errors))
    return serializer.validated_data


def text_field(
    label: str,
    max_length: int,
    *,
    required: bool = True,
    blank_message: str | None = None,
) -> serializers.CharField:
    """Trimmed, length-bounded text; blank input fails like a missing value."""
    missing = blank_message or f"{label} is required"
    return serializers.CharField(
        max_length=max_length,
        required=required,
        allow_blank=False,
        trim_whitespace=True,
        error_messages={
            "required": missing,
            "blank": missing,
            "null": missing,
            "invalid": f"{label} must be a string",
            "max_length": f"{label} must be at most {max_length:,} characters",
        },
    )


def filter_text_field(label: str, max_length: int) -> serializers.CharField:
    """Optional trimmed text used by list filters; blank means "no filter"."""
    return serializers.CharField(
        max_length=max_length,
        required=False,
        allow_blank=True,
        trim_whitespace=True,
        error_messages={"max_length": f"{label} filter must be at most {max_length} characters"},
    )


class OpaqueIdField(serializers.Field):
    """Canonical hyphenated UUID, returned as ``uuid.UUID``."""

    default_error_messages = {"invalid": "Invalid ID format"}

    def to_internal_value(self, data: Any) -> UUID:
        if not is_valid_uuid(data):
            self.fail("invalid")
        try:
            return UUID(data)
        except ValueError:
            self.fail("invalid")

    def to_representation(self, value: Any) -> str:
        return str(value)


class CalendarDateField(serializers.DateField):
    """``YYYY-MM-DD`` that must also be a real calendar date."""

    default_error_messages = {
        "invalid": "Date must be in YYYY-MM-DD format",
        "invalid_date": "Invalid date",
    }

    def to_internal_value(self, value: Any) -> date:
        if not isinstance(value, str) or not DATE_PATTERN.fullmatch(value):
            self.fail("invalid")
        try:
            return date.fromisoformat(value)
        except ValueError:
            self.fail("invalid_date")


class TimeOfDayField(serializers.Field):
    """24-hour ``HH:MM`` clock time."""

    default_error_messages = {"invalid": "Time must be in HH:MM format (24-hour)"}

    def to_internal_value(self, data: Any) -> time | None:
        if data == "":
            return None
        if not isinstance(data, str) or not TIME_PATTERN.fullmatch(data):
            self.fail("invalid")
        hours, minutes = data.split(":")
        return time(int(hours), int(minutes))

    def to_representation(self, value: time) -> str:
        return value.strftime("%H:%M")


class MusicStyleIdsField(serializers.ListField):
    """Between 1 and ``MAX_MUSIC_STYLES`` unique style ids."""

    default_error_messages = {"duplicate": "Music style IDs must be unique"}

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault(
            "child", OpaqueIdField(error_messages={"invalid": "Invalid music style ID format"})
        )
        kwargs.setdefault("allow_empty", False)
        kwargs.setdefault("min_length", 1)
        kwargs.setdefault("max_length", MAX_MUSIC_STYLES)
        error_messages = {
            "required": "At least one music style is required",
            "null": "At least one music style is required",
            "empty": "At least one music style is required",
            "min_length": "At least one music style is required",
            "max_length": f"Maximum {MAX_MUSIC_STYLES} music styles allowed",
            "not_a_list": "Music style IDs must be a list",
        }
        error_messages.update(kwargs.pop("error_messages", {}))
        super().__init__(error_messages=error_messages, **kwargs)

    def to_internal_value(self, data: Any) -> list[UUID]:
        ids = super().to_internal_value(data)
        if len(set(ids)) != len(ids):
            self.fail("duplicate")
        return ids


class CommaSeparatedIdsField(serializers.CharField):
    """Query-string list of ids such as ``?music_styles=<id>,<id>``."""

    default_error_messages = {
        "invalid_id": "Invalid music style ID format",
        "max_items": f"Maximum {MAX_MUSIC_STYLES} music styles allowed",
    }

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_blank", True)
        super().__init__(**kwargs)

    def to_internal_value(self, data: Any) -> tuple[UUID, ...]:
        raw = super().to_internal_value(data)
        parts = [part.strip() for part in raw.split(",") if part.strip()]
        if len(parts) > MAX_MUSIC_STYLES:
            self.fail("max_items")
        if not all(is_valid_uuid(part) for part in parts):
            self.fail("invalid_id")
        return tuple(dict.fromkeys(UUID(part) for part in parts))


class PaginationQuerySerializer(serializers.Serializer):
    """``page`` must be positive; ``limit`` is clamped later by ``PageRequest.build``."""

    page = serializers.IntegerField(
        required=False,
        min_value=1,
        error_messages={
            "invalid": "Page must be a positive integer",
            "min_value": "Page must be a positive integer",
        },
    )
    limit = serializers.IntegerField(
        required=False,
        error_messages={"invalid": "Limit must be an integer"},
    )


def check_date_range(attrs: dict, start: str, end: str) -> None:
    """Reject ranges where ``start`` is after ``end``; open ends are fine."""
    if attrs.get(start) and attrs.get(end) and attrs[start] > attrs[end]:
        raise serializers.ValidationError({start: f"{start} must be before or equal to {end}"})


class PasswordUpdateSerializer(serializers.Serializer):
    """Password change request forwarded to the identity provider."""

    password = serializers.CharField(
        min_length=8,
        trim_whitespace=False,
        error_messages={
            "required": "Password is required",
            "blank": "Password is required",
            "min_length": "Password must be at least 8 characters long",
        },
    )
    password_confirmation = serializers.CharField(
        trim_whitespace=False,
        error_messages={
            "required": "Password confirmation is required",
            "blank": "Password confirmation is required",
        },
    )

    def validate_password(self, value: str) -> str:
        if not PASSWORD_PATTERN.search(value):
            raise serializers.ValidationError("Password must contain uppercase, lowercase, and number")
        return value

    def validate(self, attrs: dict) -> dict:
        if attrs["password"] != attrs["password_confirmation"]:
            raise serializers.ValidationError({"password_confirmation": "Passwords do not match"})
        return attrs
