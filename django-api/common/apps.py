from django.apps import AppConfig


class CommonConfig(AppConfig):
    name = "common"
    verbose_name = "Shared service infrastructure"

    def ready(self) -> None:
        from common.config import load_booking_config

        load_booking_config()
