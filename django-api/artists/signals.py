"""Django signals for cache invalidation.

Style links are written with ``bulk_create``, which sends no signals, so the
artist save that always accompanies a link change also invalidates.
"""

import structlog
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver

from artists.cache import invalidate_music_styles
from artists.models import Artist, ArtistMusicStyle, MusicStyle

logger = structlog.get_logger(__name__)


@receiver([post_save, post_delete], sender=MusicStyle)
def invalidate_on_music_style_change(sender, instance, **kwargs):
    """Invalidate the style list when a style is saved or deleted."""
    invalidate_music_styles()
    logger.debug("music_styles_cache_invalidated", reason="music_style", style_id=str(instance.pk))


@receiver([post_save, post_delete], sender=ArtistMusicStyle)
def invalidate_on_style_link_change(sender, instance, **kwargs):
    """Usage counts change whenever an artist gains or loses a style."""
    invalidate_music_styles()


@receiver([post_save, post_delete], sender=Artist)
def invalidate_on_artist_change(sender, instance, **kwargs):
    invalidate_music_styles()
