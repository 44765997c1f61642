from django.apps import AppConfig


class NavmenusConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "navmenus"

    def ready(self):
        from navmenus import checks  # noqa: F401
