from django.apps import AppConfig


class ArtistsConfig(AppConfig):
    name = "artists"
    verbose_name = "Artist profiles"

    def ready(self) -> None:
        from artists import signals  # noqa: F401
