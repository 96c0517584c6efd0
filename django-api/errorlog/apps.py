from django.apps import AppConfig


class ErrorLogConfig(AppConfig):
    name = "errorlog"
    verbose_name = "Error log"
