"""DRF exception handler - every error a view raises ends up here.

Builds the request context (without credentials), runs the classifier and
error log, and renders the ``{"error": {...}}`` envelope.
"""

import json
from typing import Any

from rest_framework import exceptions as drf_exceptions
from rest_framework.request import Request
from rest_framework.response import Response

from common.config import get_booking_config
from common.identifiers import is_valid_uuid
from errorlog.domain import ErrorContext
from errorlog.services.error_log_service import ErrorLogService
from errorlog.stores.django_store import DjangoErrorLogStore

REDACTED = "[REDACTED]"
SECRET_MARKERS = ("password", "token", "secret", "authorization", "api_key")
BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})


def booking_exception_handler(exc: Exception, context: dict[str, Any]) -> Response:
    request = context.get("request")
    error_context = build_error_context(request, get_booking_config().error_body_max_chars)
    classified = ErrorLogService(DjangoErrorLogStore()).classify_and_record(exc, error_context)

    headers = {}
    auth_header = getattr(exc, "auth_header", None)
    if auth_header:
        headers["WWW-Authenticate"] = auth_header
    wait = getattr(exc, "wait", None)
    if wait:
        headers["Retry-After"] = str(int(wait))

    return Response(classified.to_response_body(), status=classified.status, headers=headers)


def build_error_context(request: Request | None, body_max_chars: int) -> ErrorContext:
    if request is None:
        return ErrorContext()

    user = getattr(request, "user", None)
    user_id = None
    if getattr(user, "is_authenticated", False) and is_valid_uuid(str(getattr(user, "id", ""))):
        user_id = str(user.id)
    user_agent = request.META.get("HTTP_USER_AGENT")

    return ErrorContext(
        request_url=request.get_full_path()[:2048],
        method=request.method,
        user_agent=user_agent[:512] if user_agent else None,
        user_id=user_id,
        request_body=_request_body(request, body_max_chars),
    )


def _request_body(request: Request, max_chars: int) -> str | None:
    if request.method not in BODY_METHODS:
        return None
    try:
        data = request.data
    except (drf_exceptions.ParseError, drf_exceptions.UnsupportedMediaType):
        return None
    if not data:
        return None
    serialized = json.dumps(redact(data), default=str, ensure_ascii=False)
    if len(serialized) > max_chars:
        return serialized[:max_chars] + "...[truncated]"
    return serialized


def redact(value: Any) -> Any:
    """Replace values whose key looks like a credential."""
    if isinstance(value, dict):
        return {
            key: REDACTED if _is_secret(key) else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


def _is_secret(key: Any) -> bool:
    lowered = str(key).lower()
    return any(marker in lowered for marker in SECRET_MARKERS)
