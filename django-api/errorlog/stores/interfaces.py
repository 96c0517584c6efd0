"""Store interface for the error log."""

from abc import ABC, abstractmethod

from errorlog.domain import ErrorLogEntry


class ErrorLogStore(ABC):
    """Interface for appending error log records."""

    @abstractmethod
    def append(self, entry: ErrorLogEntry) -> None:
        """Persist one record. May raise any store failure."""
        ...
