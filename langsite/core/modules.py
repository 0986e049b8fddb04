# core/modules.py
from django.apps import apps


class ModuleHandler:
    """Présence d'un module (= app Django installée, par label)."""

    def module_exists(self, name: str) -> bool:
        try:
            apps.get_app_config(name)
        except LookupError:
            return False
        return True
