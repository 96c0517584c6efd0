"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never catch errors; the DRF exception handler classifies and logs them
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from artists.cache import MUSIC_STYLES_LIST_KEY
from artists.handlers.serializers import (
    ArtistDetailSerializer,
    ArtistSearchQuerySerializer,
    ArtistSerializer,
    ArtistSummarySerializer,
    CreateArtistSerializer,
    MusicStyleSerializer,
    ProfileStatusSerializer,
    UpdateArtistSerializer,
)
from artists.services.artist_service import ArtistService
from artists.stores.django_store import DjangoArtistStore
from common.config import get_booking_config
from common.pagination import PageRequest
from common.responses import data_response, page_response, query_data
from common.validation import validate_payload


def artist_service() -> ArtistService:
    return ArtistService(DjangoArtistStore(), get_booking_config())


class ArtistListView(APIView):
    """Handler for GET and POST /api/artists"""

    def get(self, request: Request) -> Response:
        query = validate_payload(ArtistSearchQuerySerializer, query_data(request))
        page_request = PageRequest.build(query.get("page"), query.get("limit"), get_booking_config())
        page = artist_service().search_artists(
            ArtistSearchQuerySerializer.build_criteria(query), page_request
        )
        return page_response(page, ArtistSummarySerializer(page.items, many=True).data)

    def post(self, request: Request) -> Response:
        data = validate_payload(CreateArtistSerializer, request.data)
        artist = artist_service().create_artist(
            CreateArtistSerializer.build_command(data), request.user.id
        )
        return data_response(ArtistSerializer(artist).data, status.HTTP_201_CREATED)


class ArtistDetailView(APIView):
    """Handler for GET and PUT /api/artists/{artist_id}"""

    def get(self, request: Request, artist_id: str) -> Response:
        detail = artist_service().get_artist(artist_id)
        return data_response(ArtistDetailSerializer(detail).data)

    def put(self, request: Request, artist_id: str) -> Response:
        data = validate_payload(UpdateArtistSerializer, request.data)
        artist = artist_service().update_artist(
            artist_id, UpdateArtistSerializer.build_command(data), request.user.id
        )
        return data_response(ArtistSerializer(artist).data)


class MusicStyleListView(APIView):
    """Handler for GET /api/music-styles (cached)"""

    permission_classes = [AllowAny]

    def get(self, request: Request) -> Response:
        body = cache.get(MUSIC_STYLES_LIST_KEY)
        if body is None:
            styles = artist_service().list_music_styles()
            body = {
                "data": [dict(row) for row in MusicStyleSerializer(styles, many=True).data],
                "total": len(styles),
            }
            cache.set(MUSIC_STYLES_LIST_KEY, body, get_booking_config().music_styles_cache_seconds)
        return Response(body)


class ProfileStatusView(APIView):
    """Handler for GET /api/auth/profile-status"""

    permission_classes = [IsAuthenticated]

    def get(self, request: Request) -> Response:
        profile_status = artist_service().get_profile_status(request.user.id)
        return data_response(ProfileStatusSerializer(profile_status).data)
