"""Map any raised exception onto the error taxonomy."""

from django.core.exceptions import PermissionDenied as DjangoPermissionDenied
from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions as drf_exceptions

from common.errors import DomainError, ErrorCode, ErrorKind, ValidationFailed, status_for_kind
from common.validation import flatten_errors
from errorlog.domain import ClassifiedError

DATABASE_MESSAGE = "Database operation failed"
INTERNAL_MESSAGE = "Internal server error"

# Known failure phrases for exceptions raised outside the domain hierarchy.
# Order matters: the first matching phrase wins.
FAILURE_VOCABULARY: tuple[tuple[str, ErrorKind, ErrorCode], ...] = (
    ("already exists", ErrorKind.CONFLICT, ErrorCode.CONFLICT),
    ("not found", ErrorKind.NOT_FOUND, ErrorCode.NOT_FOUND),
    ("cannot modify other user", ErrorKind.AUTHORIZATION, ErrorCode.FORBIDDEN),
    ("cannot modify past events", ErrorKind.BUSINESS_LOGIC, ErrorCode.BUSINESS_LOGIC_ERROR),
    ("event date must be", ErrorKind.VALIDATION, ErrorCode.VALIDATION_ERROR),
    ("invalid music style ids", ErrorKind.BUSINESS_LOGIC, ErrorCode.BUSINESS_LOGIC_ERROR),
    ("failed to", ErrorKind.DATABASE, ErrorCode.DATABASE_ERROR),
)


def classify(exc: BaseException) -> ClassifiedError:
    """Classify an exception without side effects."""
    if isinstance(exc, DomainError):
        return _classify_domain_error(exc)
    if isinstance(exc, drf_exceptions.APIException):
        return _classify_api_exception(exc)
    if isinstance(exc, Http404):
        return _build(ErrorKind.NOT_FOUND, ErrorCode.NOT_FOUND.value, "Resource not found", str(exc))
    if isinstance(exc, DjangoPermissionDenied):
        return _build(ErrorKind.AUTHORIZATION, ErrorCode.FORBIDDEN.value, "Access forbidden", str(exc))
    if isinstance(exc, DatabaseError):
        return _build(
            ErrorKind.DATABASE,
            ErrorCode.DATABASE_ERROR.value,
            DATABASE_MESSAGE,
            f"Database operation failed: {exc}",
            include_trace=True,
        )
    return _classify_by_message(exc)


def _classify_domain_error(exc: DomainError) -> ClassifiedError:
    if exc.kind is ErrorKind.DATABASE:
        return _build(exc.kind, exc.code.value, DATABASE_MESSAGE, exc.message, include_trace=True)
    if exc.kind in (ErrorKind.INTERNAL, ErrorKind.EXTERNAL_API):
        return _build(exc.kind, exc.code.value, INTERNAL_MESSAGE, exc.message, include_trace=True)
    internal = exc.message
    if isinstance(exc, ValidationFailed):
        internal = _violations_message(exc.violations)
    return _build(exc.kind, exc.code.value, exc.message, internal, details=exc.details)


def _classify_api_exception(exc: drf_exceptions.APIException) -> ClassifiedError:
    if isinstance(exc, drf_exceptions.ValidationError):
        violations = flatten_errors(exc.detail)
        return _build(
            ErrorKind.VALIDATION,
            ErrorCode.VALIDATION_ERROR.value,
            "Validation failed",
            _violations_message(violations),
            details=violations,
        )
    if isinstance(exc, drf_exceptions.ParseError):
        message = f"Invalid JSON format: {exc.detail}"
        return _build(ErrorKind.VALIDATION, ErrorCode.INVALID_JSON.value, message, message)
    if isinstance(exc, (drf_exceptions.NotAuthenticated, drf_exceptions.AuthenticationFailed)):
        message = str(exc.detail)
        return _build(ErrorKind.AUTHENTICATION, ErrorCode.UNAUTHORIZED.value, message, message)
    if isinstance(exc, drf_exceptions.PermissionDenied):
        message = str(exc.detail)
        return _build(ErrorKind.AUTHORIZATION, ErrorCode.FORBIDDEN.value, message, message)
    if isinstance(exc, drf_exceptions.NotFound):
        message = str(exc.detail)
        return _build(ErrorKind.NOT_FOUND, ErrorCode.NOT_FOUND.value, message, message)

    # MethodNotAllowed, UnsupportedMediaType, Throttled and friends keep their own status.
    message = str(exc.detail)
    kind = ErrorKind.VALIDATION if exc.status_code < 500 else ErrorKind.INTERNAL
    code = exc.default_code.upper() if isinstance(exc.default_code, str) else ErrorCode.INTERNAL_ERROR.value
    return ClassifiedError(
        kind=kind,
        code=code,
        message=message,
        status=exc.status_code,
        internal_message=message,
    )


def _classify_by_message(exc: BaseException) -> ClassifiedError:
    text = str(exc)
    lowered = text.lower()
    for phrase, kind, code in FAILURE_VOCABULARY:
        if phrase in lowered:
            if kind is ErrorKind.DATABASE:
                return _build(kind, code.value, DATABASE_MESSAGE, text, include_trace=True)
            return _build(kind, code.value, text, text)
    internal = f"{type(exc).__name__}: {text}" if text else type(exc).__name__
    return _build(
        ErrorKind.INTERNAL,
        ErrorCode.INTERNAL_ERROR.value,
        INTERNAL_MESSAGE,
        internal,
        include_trace=True,
    )


def _violations_message(violations: list[dict[str, str]]) -> str:
    joined = ", ".join(f"{item['field']}: {item['message']}" for item in violations)
    return f"Validation failed: {joined}"


def _build(
    kind: ErrorKind,
    code: str,
    message: str,
    internal_message: str,
    details=None,
    include_trace: bool = False,
) -> ClassifiedError:
    return ClassifiedError(
        kind=kind,
        code=code,
        message=message,
        status=status_for_kind(kind),
        internal_message=internal_message,
        details=details,
        include_trace=include_trace,
    )
