from events.domain.models import Event, EventCommand, EventOwner
from events.domain.value_objects import EventId, EventListCriteria

__all__ = [
    "Event",
    "EventCommand",
    "EventOwner",
    "EventId",
    "EventListCriteria",
]
