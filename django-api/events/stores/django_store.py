"""Django ORM implementation of the EventStore."""

from datetime import date

from django.db import transaction
from django.db.models import Q

from artists.domain.value_objects import ArtistId
from artists.models import Artist as ArtistModel
from common.errors import translate_database_errors
from common.pagination import PageRequest
from events.domain import Event, EventCommand, EventId, EventListCriteria, EventOwner
from events.domain.errors import EventNotFoundError
from events.models import Event as EventModel
from events.stores.interfaces import EventStore

MUTABLE_FIELDS = ("event_name", "country", "city", "venue_name", "event_date", "event_time")


def event_to_domain(row: EventModel, with_owner: bool = False) -> Event:
    """Convert an ORM row. ``with_owner`` expects ``artist`` to be selected."""
    owner = None
    if with_owner:
        owner = EventOwner(id=ArtistId(row.artist_id), artist_name=row.artist.artist_name)
    return Event(
        id=EventId(row.id),
        owner_id=ArtistId(row.artist_id),
        event_name=row.event_name,
        country=row.country,
        city=row.city,
        venue_name=row.venue_name,
        event_date=row.event_date,
        event_time=row.event_time,
        created_at=row.created_at,
        updated_at=row.updated_at,
        owner=owner,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def get_event(self, event_id: EventId) -> Event | None:
        with translate_database_errors("fetch event"):
            row = EventModel.objects.select_related("artist").filter(pk=event_id.value).first()
        return event_to_domain(row, with_owner=True) if row else None

    def owner_exists(self, owner_id: ArtistId) -> bool:
        with translate_database_errors("check user profile"):
            return ArtistModel.objects.filter(pk=owner_id.value).exists()

    def create_event(self, owner_id: ArtistId, command: EventCommand) -> Event:
        with translate_database_errors("create event"):
            row = EventModel.objects.create(
                artist_id=owner_id.value,
                **{field: getattr(command, field) for field in MUTABLE_FIELDS},
            )
            row = EventModel.objects.select_related("artist").get(pk=row.pk)
        return event_to_domain(row, with_owner=True)

    def update_event(self, event_id: EventId, command: EventCommand) -> Event:
        with translate_database_errors("update event"), transaction.atomic():
            row = (
                EventModel.objects.select_for_update()
                .select_related("artist")
                .filter(pk=event_id.value)
                .first()
            )
            if row is None:
                raise EventNotFoundError(str(event_id))
            for field in MUTABLE_FIELDS:
                setattr(row, field, getattr(command, field))
            row.save(update_fields=[*MUTABLE_FIELDS, "updated_at"])
        return event_to_domain(row, with_owner=True)

    def delete_event(self, event_id: EventId) -> None:
        with translate_database_errors("delete event"):
            deleted, _ = EventModel.objects.filter(pk=event_id.value).delete()
        if not deleted:
            raise EventNotFoundError(str(event_id))

    def list_events(
        self, criteria: EventListCriteria, page: PageRequest, today: date
    ) -> tuple[list[Event], int]:
        queryset = EventModel.objects.filter(self._criteria_filter(criteria, today))
        with translate_database_errors("fetch events"):
            total = queryset.count()
            rows = list(
                queryset.select_related("artist").order_by("-event_date", "-created_at", "-id")[
                    page.offset : page.offset + page.limit
                ]
            )
        return [event_to_domain(row, with_owner=True) for row in rows], total

    @staticmethod
    def _criteria_filter(criteria: EventListCriteria, today: date) -> Q:
        condition = Q()
        if criteria.user_id is not None:
            condition &= Q(artist_id=criteria.user_id.value)
        if criteria.country:
            condition &= Q(country__icontains=criteria.country)
        if criteria.city:
            condition &= Q(city__icontains=criteria.city)
        if criteria.venue:
            condition &= Q(venue_name__icontains=criteria.venue)
        if criteria.date_from:
            condition &= Q(event_date__gte=criteria.date_from)
        if criteria.date_to:
            condition &= Q(event_date__lte=criteria.date_to)
        if criteria.upcoming_only:
            condition &= Q(event_date__gte=today)
        return condition
