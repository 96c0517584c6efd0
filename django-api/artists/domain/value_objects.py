"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from datetime import date
from typing import Self
from uuid import UUID

from common.identifiers import parse_uuid


@dataclass(frozen=True)
class ArtistId:
    """Identifier of an artist profile; equal to the owning principal id."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=parse_uuid(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class MusicStyleId:
    """Unique identifier for a MusicStyle."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=parse_uuid(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class ArtistSearchCriteria:
    """Optional artist search filters, all ANDed together.

    The availability window may be open on either side.
    """

    search: str | None = None
    music_style_ids: tuple[MusicStyleId, ...] = ()
    location: str | None = None
    available_from: date | None = None
    available_to: date | None = None

    def __post_init__(self) -> None:
        if self.available_from and self.available_to and self.available_from > self.available_to:
            raise ValueError("available_from must be before or equal to available_to")

    @property
    def filters_availability(self) -> bool:
        return self.available_from is not None or self.available_to is not None
