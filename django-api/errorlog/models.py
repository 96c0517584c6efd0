"""Django ORM model for the error log (persistence layer).

Rows are append-only: the model refuses updates and deletes.
"""

import uuid

from django.db import models


class ErrorLog(models.Model):
    """Persistence model for recorded service failures."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    error_message = models.TextField()
    error_type = models.CharField(max_length=50)
    request_url = models.CharField(max_length=2048, blank=True, null=True)
    request_method = models.CharField(max_length=10, blank=True, null=True)
    user_agent = models.CharField(max_length=512, blank=True, null=True)
    user_id = models.UUIDField(blank=True, null=True)
    request_body = models.TextField(blank=True, null=True)
    stack_trace = models.TextField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "error_logs"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["error_type", "created_at"], name="idx_error_logs_type"),
            models.Index(fields=["user_id"], name="idx_error_logs_user"),
        ]

    def __str__(self) -> str:
        return f"{self.error_type}: {self.error_message[:80]}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise ValueError("Error log entries are append-only. Updates are not allowed.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise ValueError("Error log entries are append-only. Deletions are not allowed.")
