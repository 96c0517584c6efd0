from errorlog.domain.models import ClassifiedError, ErrorContext, ErrorLogEntry

__all__ = [
    "ClassifiedError",
    "ErrorContext",
    "ErrorLogEntry",
]
