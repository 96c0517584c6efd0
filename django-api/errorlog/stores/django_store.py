"""Django ORM implementation of the ErrorLogStore."""

from django.db import transaction

from errorlog.domain import ErrorLogEntry
from errorlog.models import ErrorLog
from errorlog.stores.interfaces import ErrorLogStore


class DjangoErrorLogStore(ErrorLogStore):
    """PostgreSQL-backed error log using Django ORM."""

    def append(self, entry: ErrorLogEntry) -> None:
        # Own savepoint so a failed write cannot poison the caller's transaction.
        with transaction.atomic():
            ErrorLog.objects.create(
                error_message=entry.error_message,
                error_type=entry.error_type.value,
                request_url=entry.request_url,
                request_method=entry.request_method,
                user_agent=entry.user_agent,
                user_id=entry.user_id,
                request_body=entry.request_body,
                stack_trace=entry.stack_trace,
            )
