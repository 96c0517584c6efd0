"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Never contain business logic
- Never catch errors; the DRF exception handler classifies and logs them
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from common.config import get_booking_config
from common.pagination import PageRequest
from common.responses import data_response, message_response, page_response, query_data
from common.validation import validate_payload
from events.handlers.serializers import (
    EventInputSerializer,
    EventListQuerySerializer,
    EventSerializer,
)
from events.services.event_service import EventService
from events.stores.django_store import DjangoEventStore


def event_service() -> EventService:
    return EventService(DjangoEventStore(), get_booking_config())


class EventListView(APIView):
    """Handler for GET and POST /api/events"""

    def get(self, request: Request) -> Response:
        query = validate_payload(EventListQuerySerializer, query_data(request))
        page_request = PageRequest.build(query.get("page"), query.get("limit"), get_booking_config())
        page = event_service().list_events(
            EventListQuerySerializer.build_criteria(query), page_request
        )
        return page_response(page, EventSerializer(page.items, many=True).data)

    def post(self, request: Request) -> Response:
        data = validate_payload(EventInputSerializer, request.data)
        event = event_service().create_event(
            EventInputSerializer.build_command(data), request.user.id
        )
        return data_response(EventSerializer(event).data, status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET, PUT and DELETE /api/events/{event_id}"""

    def get(self, request: Request, event_id: str) -> Response:
        event = event_service().get_event(event_id)
        return data_response(EventSerializer(event).data)

    def put(self, request: Request, event_id: str) -> Response:
        data = validate_payload(EventInputSerializer, request.data)
        event = event_service().update_event(
            event_id, EventInputSerializer.build_command(data), request.user.id
        )
        return data_response(EventSerializer(event).data)

    def delete(self, request: Request, event_id: str) -> Response:
        event_service().delete_event(event_id, request.user.id)
        return message_response("Event successfully deleted")
