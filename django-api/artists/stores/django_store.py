"""Django ORM implementation of the ArtistStore."""

from datetime import date

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import Count, Exists, OuterRef, Q

from artists.domain import (
    Artist,
    ArtistId,
    ArtistSearchCriteria,
    ArtistSummary,
    CreateArtistCommand,
    MusicStyle,
    MusicStyleId,
    UpdateArtistCommand,
)
from artists.domain.errors import ArtistNameTakenError, ArtistNotFoundError, ProfileExistsError
from artists.models import Artist as ArtistModel
from artists.models import ArtistMusicStyle as ArtistMusicStyleModel
from artists.models import MusicStyle as MusicStyleModel
from artists.stores.interfaces import ArtistStore
from common.errors import DomainError, PersistenceError, translate_database_errors
from common.pagination import PageRequest
from events.domain import Event
from events.models import Event as EventModel
from events.stores.django_store import event_to_domain

PROFILE_FIELDS = ("artist_name", "biography", "instagram_url", "facebook_url")


def music_style_to_domain(row: MusicStyleModel) -> MusicStyle:
    return MusicStyle(
        id=MusicStyleId(row.id),
        style_name=row.style_name,
        created_at=row.created_at,
        usage_count=getattr(row, "usage_count", 0),
    )


def artist_to_domain(row: ArtistModel) -> Artist:
    """Convert an ORM row. Styles come from the prefetch cache when present."""
    return Artist(
        id=ArtistId(row.id),
        artist_name=row.artist_name,
        biography=row.biography,
        instagram_url=row.instagram_url,
        facebook_url=row.facebook_url,
        created_at=row.created_at,
        updated_at=row.updated_at,
        music_styles=tuple(music_style_to_domain(style) for style in row.music_styles.all()),
    )


def _integrity_error(
    exc: IntegrityError, artist_id: ArtistId, artist_name: str | None, operation: str
) -> DomainError:
    """Map a constraint violation onto the matching conflict error."""
    text = str(exc).lower()
    if "artist_name" in text:
        return ArtistNameTakenError(artist_name or "")
    if "artists.id" in text or "artists_pkey" in text:
        return ProfileExistsError(str(artist_id))
    return PersistenceError(operation, exc)


class DjangoArtistStore(ArtistStore):
    """Relational artist store using Django ORM."""

    def get_artist(self, artist_id: ArtistId) -> Artist | None:
        with translate_database_errors("fetch user"):
            row = (
                ArtistModel.objects.prefetch_related("music_styles")
                .filter(pk=artist_id.value)
                .first()
            )
        return artist_to_domain(row) if row else None

    def artist_exists(self, artist_id: ArtistId) -> bool:
        with translate_database_errors("check user profile"):
            return ArtistModel.objects.filter(pk=artist_id.value).exists()

    def artist_name_taken(self, artist_name: str, exclude_id: ArtistId | None = None) -> bool:
        queryset = ArtistModel.objects.filter(artist_name=artist_name)
        if exclude_id is not None:
            queryset = queryset.exclude(pk=exclude_id.value)
        with translate_database_errors("check artist name"):
            return queryset.exists()

    def find_missing_music_styles(self, style_ids: tuple[MusicStyleId, ...]) -> list[MusicStyleId]:
        with translate_database_errors("validate music styles"):
            existing = set(
                MusicStyleModel.objects.filter(pk__in=[style.value for style in style_ids])
                .values_list("pk", flat=True)
            )
        return [style for style in style_ids if style.value not in existing]

    def create_artist(self, artist_id: ArtistId, command: CreateArtistCommand) -> Artist:
        try:
            with transaction.atomic():
                row = ArtistModel.objects.create(
                    id=artist_id.value,
                    **{field: getattr(command, field) for field in PROFILE_FIELDS},
                )
                self._link_styles(row.pk, command.music_style_ids)
        except IntegrityError as exc:
            raise _integrity_error(exc, artist_id, command.artist_name, "create user") from exc
        except DatabaseError as exc:
            raise PersistenceError("create user", exc) from exc
        return self._reload(artist_id)

    def update_artist(self, artist_id: ArtistId, command: UpdateArtistCommand) -> Artist:
        try:
            with transaction.atomic():
                row = ArtistModel.objects.select_for_update().filter(pk=artist_id.value).first()
                if row is None:
                    raise ArtistNotFoundError(str(artist_id))
                changed = [field for field in PROFILE_FIELDS if command.changes(field)]
                for field in changed:
                    setattr(row, field, getattr(command, field))
                # updated_at moves even when only the style set changes
                row.save(update_fields=[*changed, "updated_at"])
                if command.music_style_ids is not None:
                    ArtistMusicStyleModel.objects.filter(artist_id=row.pk).delete()
                    self._link_styles(row.pk, command.music_style_ids)
        except IntegrityError as exc:
            raise _integrity_error(exc, artist_id, command.artist_name, "update user") from exc
        except DatabaseError as exc:
            raise PersistenceError("update user", exc) from exc
        return self._reload(artist_id)

    def search_artists(
        self, criteria: ArtistSearchCriteria, page: PageRequest, today: date
    ) -> tuple[list[ArtistSummary], int]:
        queryset = self._apply_criteria(ArtistModel.objects.all(), criteria)
        with translate_database_errors("search artists"):
            total = queryset.count()
            rows = list(
                queryset.annotate(
                    upcoming_events_count=Count(
                        "events", filter=Q(events__event_date__gte=today), distinct=True
                    )
                )
                .prefetch_related("music_styles")
                .order_by("-created_at", "-id")[page.offset : page.offset + page.limit]
            )
        summaries = [
            ArtistSummary(artist=artist_to_domain(row), upcoming_events_count=row.upcoming_events_count)
            for row in rows
        ]
        return summaries, total

    def list_events_for_artist(self, artist_id: ArtistId) -> list[Event]:
        with translate_database_errors("fetch user events"):
            rows = list(
                EventModel.objects.filter(artist_id=artist_id.value).order_by(
                    "-event_date", "-created_at", "-id"
                )
            )
        return [event_to_domain(row) for row in rows]

    def list_music_styles(self) -> list[MusicStyle]:
        with translate_database_errors("fetch music styles"):
            rows = list(
                MusicStyleModel.objects.annotate(usage_count=Count("artist_links")).order_by(
                    "style_name"
                )
            )
        return [music_style_to_domain(row) for row in rows]

    @staticmethod
    def _apply_criteria(queryset, criteria: ArtistSearchCriteria):
        if criteria.search:
            queryset = queryset.filter(
                Q(artist_name__icontains=criteria.search) | Q(biography__icontains=criteria.search)
            )
        if criteria.music_style_ids:
            queryset = queryset.filter(
                Exists(
                    ArtistMusicStyleModel.objects.filter(
                        artist=OuterRef("pk"),
                        music_style_id__in=[style.value for style in criteria.music_style_ids],
                    )
                )
            )
        if criteria.location:
            location = criteria.location
            queryset = queryset.filter(
                Exists(
                    EventModel.objects.filter(artist=OuterRef("pk")).filter(
                        Q(country__icontains=location)
                        | Q(city__icontains=location)
                        | Q(venue_name__icontains=location)
                    )
                )
            )
        if criteria.filters_availability:
            booked = EventModel.objects.filter(artist=OuterRef("pk"))
            if criteria.available_from:
                booked = booked.filter(event_date__gte=criteria.available_from)
            if criteria.available_to:
                booked = booked.filter(event_date__lte=criteria.available_to)
            queryset = queryset.filter(~Exists(booked))
        return queryset

    @staticmethod
    def _link_styles(artist_pk, style_ids: tuple[MusicStyleId, ...]) -> None:
        ArtistMusicStyleModel.objects.bulk_create(
            [ArtistMusicStyleModel(artist_id=artist_pk, music_style_id=style.value) for style in style_ids]
        )

    def _reload(self, artist_id: ArtistId) -> Artist:
        artist = self.get_artist(artist_id)
        if artist is None:
            raise ArtistNotFoundError(str(artist_id))
        return artist
