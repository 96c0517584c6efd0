"""Success envelopes shared by every view.

Errors never go through here; the DRF exception handler renders those.
"""

from typing import Any

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from common.pagination import Page


def data_response(data: Any, status_code: int = status.HTTP_200_OK) -> Response:
    return Response({"data": data}, status=status_code)


def page_response(page: Page, data: list[Any]) -> Response:
    return Response({"data": data, "pagination": page.pagination()})


def message_response(message: str) -> Response:
    return Response({"message": message})


def query_data(request: Request) -> dict[str, str]:
    """Query parameters with blank values dropped, so ``?city=`` means no filter."""
    return {key: value for key, value in request.query_params.items() if value.strip()}
