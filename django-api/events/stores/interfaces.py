"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from datetime import date

from artists.domain.value_objects import ArtistId
from common.pagination import PageRequest
from events.domain import Event, EventCommand, EventId, EventListCriteria


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event with its owner summary, or None if not found."""
        ...

    @abstractmethod
    def owner_exists(self, owner_id: ArtistId) -> bool:
        """Check if the principal has an artist profile to own events."""
        ...

    @abstractmethod
    def create_event(self, owner_id: ArtistId, command: EventCommand) -> Event:
        ...

    @abstractmethod
    def update_event(self, event_id: EventId, command: EventCommand) -> Event:
        """Replace every mutable field. The owner never changes."""
        ...

    @abstractmethod
    def delete_event(self, event_id: EventId) -> None:
        ...

    @abstractmethod
    def list_events(
        self, criteria: EventListCriteria, page: PageRequest, today: date
    ) -> tuple[list[Event], int]:
        """Return one page ordered by event_date then created_at, newest first, plus the total."""
        ...
