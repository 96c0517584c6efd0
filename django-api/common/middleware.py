"""Request middleware."""

import secrets

import structlog


class RequestIDMiddleware:
    """Add a request id to every request for tracing.

    The id is bound to the structlog context for the lifetime of the request
    and echoed back in the ``X-Request-ID`` response header.
    """

    header = "X-Request-ID"

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get(self.header) or secrets.token_hex(8)
        request.request_id = request_id
        structlog.contextvars.bind_contextvars(request_id=request_id)
        try:
            response = self.get_response(request)
        finally:
            structlog.contextvars.unbind_contextvars("request_id")
        response[self.header] = request_id
        return response
