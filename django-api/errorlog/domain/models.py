"""Domain models for recorded failures."""

from dataclasses import dataclass
from typing import Any

from common.errors import ErrorKind


@dataclass(frozen=True)
class ErrorContext:
    """Request facts captured alongside a failure. Never holds credentials."""

    request_url: str | None = None
    method: str | None = None
    user_agent: str | None = None
    user_id: str | None = None
    request_body: str | None = None


@dataclass(frozen=True)
class ClassifiedError:
    """A failure mapped onto the taxonomy.

    ``message`` and ``details`` are safe to return to the caller;
    ``internal_message`` is what gets written to the error log.
    """

    kind: ErrorKind
    code: str
    message: str
    status: int
    internal_message: str
    details: Any = None
    include_trace: bool = False

    def to_response_body(self) -> dict[str, Any]:
        error: dict[str, Any] = {"message": self.message, "code": self.code}
        if self.details is not None:
            error["details"] = self.details
        return {"error": error}


@dataclass(frozen=True)
class ErrorLogEntry:
    """One append-only error log record."""

    error_message: str
    error_type: ErrorKind
    request_url: str | None
    request_method: str | None
    user_agent: str | None
    user_id: str | None
    request_body: str | None
    stack_trace: str | None
