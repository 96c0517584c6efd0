"""Cache keys for artist reference data."""

from django.core.cache import cache

MUSIC_STYLES_LIST_KEY = "music_styles:list"


def invalidate_music_styles() -> None:
    cache.delete(MUSIC_STYLES_LIST_KEY)
