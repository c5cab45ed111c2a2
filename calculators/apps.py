from django.apps import AppConfig
from django.core import checks


class CalculatorsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "calculators"

    def ready(self):
        from .checks import check_unique_routes

        checks.register(check_unique_routes)
