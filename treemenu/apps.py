from django.apps import AppConfig


class TreeMenuConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "treemenu"

    def ready(self):
        from django.core import checks
        from django.core.signals import setting_changed

        from treemenu.checks import check_menu_resources
        from treemenu.registry import clear_registry_cache

        checks.register(check_menu_resources)
        setting_changed.connect(clear_registry_cache)
