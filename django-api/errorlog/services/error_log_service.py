"""Error log service - classifies failures and records them.

Recording must never fail the request: if the store write raises, the
failure and the original error go to the structured log instead.
"""

import traceback

import structlog

from common.errors import ErrorKind
from errorlog.domain import ClassifiedError, ErrorContext, ErrorLogEntry
from errorlog.services.classifier import classify
from errorlog.stores.interfaces import ErrorLogStore

logger = structlog.get_logger(__name__)

_QUIET_KINDS = frozenset(
    {
        ErrorKind.VALIDATION,
        ErrorKind.NOT_FOUND,
        ErrorKind.CONFLICT,
        ErrorKind.BUSINESS_LOGIC,
    }
)


class ErrorLogService:
    """Service for recording classified failures."""

    def __init__(self, store: ErrorLogStore) -> None:
        self._store = store

    def classify_and_record(self, exc: BaseException, context: ErrorContext) -> ClassifiedError:
        """Classify ``exc``, write one error log record and return the safe response shape."""
        classified = classify(exc)
        self._emit(classified, context, exc)
        self.record(classified, context, exc)
        return classified

    def record(self, classified: ClassifiedError, context: ErrorContext, exc: BaseException | None = None) -> None:
        stack_trace = None
        if classified.include_trace and exc is not None:
            stack_trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))

        entry = ErrorLogEntry(
            error_message=classified.internal_message,
            error_type=classified.kind,
            request_url=context.request_url,
            request_method=context.method,
            user_agent=context.user_agent,
            user_id=context.user_id,
            request_body=context.request_body,
            stack_trace=stack_trace,
        )
        try:
            self._store.append(entry)
        except Exception as log_exc:
            logger.error(
                "error_log_write_failed",
                log_error=str(log_exc),
                original_message=classified.internal_message,
                original_type=classified.kind.value,
                request_url=context.request_url,
                request_method=context.method,
                user_id=context.user_id,
                stack_trace=stack_trace,
            )

    def _emit(self, classified: ClassifiedError, context: ErrorContext, exc: BaseException) -> None:
        fields = {
            "error_type": classified.kind.value,
            "code": classified.code,
            "status": classified.status,
            "request_url": context.request_url,
            "request_method": context.method,
            "user_id": context.user_id,
        }
        if classified.kind in _QUIET_KINDS:
            logger.info("request_rejected", message=classified.internal_message, **fields)
        elif classified.kind in (ErrorKind.AUTHENTICATION, ErrorKind.AUTHORIZATION):
            logger.warning("request_denied", message=classified.internal_message, **fields)
        else:
            logger.error(
                "request_failed",
                message=classified.internal_message,
                exception_type=type(exc).__name__,
                **fields,
            )
