"""Service-layer configuration.

Built once from ``settings.BOOKING`` when the app registry is ready and then
handed to services through their constructors. Services never read Django
settings or the environment while handling a request.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from typing import Any, Self

from django.core.exceptions import ImproperlyConfigured
from django.utils import timezone


@dataclass(frozen=True)
class BookingConfig:
    """Explicit configuration for the booking services."""

    default_page_size: int = 20
    max_page_size: int = 100
    error_body_max_chars: int = 2000
    music_styles_cache_seconds: int = 300
    principal_token_salt: str = "djbooking.principal"
    principal_token_max_age: int = 3600
    clock: Callable[[], date] = timezone.localdate

    def __post_init__(self) -> None:
        if self.max_page_size < 1:
            raise ValueError("max_page_size must be at least 1")
        if not 1 <= self.default_page_size <= self.max_page_size:
            raise ValueError("default_page_size must be between 1 and max_page_size")

    def today(self) -> date:
        return self.clock()

    @classmethod
    def from_settings(cls, values: Mapping[str, Any]) -> Self:
        defaults = cls()
        return cls(
            default_page_size=int(values.get("DEFAULT_PAGE_SIZE", defaults.default_page_size)),
            max_page_size=int(values.get("MAX_PAGE_SIZE", defaults.max_page_size)),
            error_body_max_chars=int(
                values.get("ERROR_BODY_MAX_CHARS", defaults.error_body_max_chars)
            ),
            music_styles_cache_seconds=int(
                values.get("MUSIC_STYLES_CACHE_SECONDS", defaults.music_styles_cache_seconds)
            ),
            principal_token_salt=values.get("PRINCIPAL_TOKEN_SALT", defaults.principal_token_salt),
            principal_token_max_age=int(
                values.get("PRINCIPAL_TOKEN_MAX_AGE", defaults.principal_token_max_age)
            ),
        )


_booking_config: BookingConfig | None = None


def load_booking_config() -> BookingConfig:
    """Build the configuration from Django settings. Called from AppConfig.ready()."""
    global _booking_config
    from django.conf import settings

    _booking_config = BookingConfig.from_settings(getattr(settings, "BOOKING", {}))
    return _booking_config


def get_booking_config() -> BookingConfig:
    if _booking_config is None:
        raise ImproperlyConfigured("BookingConfig requested before the app registry was ready")
    return _booking_config
