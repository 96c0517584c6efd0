"""Error taxonomy shared by every app.

Each app defines its own ``ErrorCode`` enum and ``DomainError`` subclasses in
``<app>/domain/errors.py``. The kind decides how a failure is logged and which
HTTP status the boundary answers with.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from django.db import DatabaseError


class ErrorKind(Enum):
    """Closed set of failure kinds recorded in the error log."""

    VALIDATION = "VALIDATION_ERROR"
    AUTHENTICATION = "AUTHENTICATION_ERROR"
    AUTHORIZATION = "AUTHORIZATION_ERROR"
    BUSINESS_LOGIC = "BUSINESS_LOGIC_ERROR"
    DATABASE = "DATABASE_ERROR"
    EXTERNAL_API = "EXTERNAL_API_ERROR"
    INTERNAL = "INTERNAL_SERVER_ERROR"
    NOT_FOUND = "NOT_FOUND_ERROR"
    CONFLICT = "CONFLICT_ERROR"


STATUS_BY_KIND: dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.BUSINESS_LOGIC: 400,
    ErrorKind.AUTHENTICATION: 401,
    ErrorKind.AUTHORIZATION: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
}


def status_for_kind(kind: ErrorKind) -> int:
    return STATUS_BY_KIND.get(kind, 500)


class ErrorCode(Enum):
    """Codes for failures that do not belong to a single app."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_JSON = "INVALID_JSON"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    BUSINESS_LOGIC_ERROR = "BUSINESS_LOGIC_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"
    EXTERNAL_API_ERROR = "EXTERNAL_API_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: Enum
    message: str
    details: Any = None

    kind: ClassVar[ErrorKind] = ErrorKind.BUSINESS_LOGIC

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"

    @property
    def status(self) -> int:
        return status_for_kind(self.kind)


class ValidationFailed(DomainError):
    """Raised when a payload fails schema validation.

    ``details`` is the ordered list of ``{"field", "message"}`` violations.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, violations: list[dict[str, str]]) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION_ERROR,
            message="Validation failed",
            details=violations,
        )
        self.violations = violations


class AuthenticationRequired(DomainError):
    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication required") -> None:
        super().__init__(code=ErrorCode.UNAUTHORIZED, message=message)


class PersistenceError(DomainError):
    """Raised when the store fails for reasons other than a known constraint.

    The message keeps the internal cause for the error log; the boundary
    replaces it with a generic message before responding.
    """

    kind = ErrorKind.DATABASE

    def __init__(self, operation: str, cause: Exception) -> None:
        super().__init__(
            code=ErrorCode.DATABASE_ERROR,
            message=f"Failed to {operation}: {cause}",
        )
        self.operation = operation
        self.cause = cause


@contextmanager
def translate_database_errors(operation: str) -> Iterator[None]:
    """Re-raise ORM failures inside the block as ``PersistenceError``."""
    try:
        yield
    except DatabaseError as exc:
        raise PersistenceError(operation, exc) from exc
