"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from typing import Self
from uuid import UUID

from artists.domain.value_objects import ArtistId
from common.identifiers import parse_uuid


@dataclass(frozen=True)
class EventId:
    """Unique identifier for an Event."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=parse_uuid(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class EventListCriteria:
    """Optional, independently combinable event filters."""

    user_id: ArtistId | None = None
    country: str | None = None
    city: str | None = None
    venue: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    upcoming_only: bool = False

    def __post_init__(self) -> None:
        if self.date_from and self.date_to and self.date_from > self.date_to:
            raise ValueError("date_from must be before or equal to date_to")
