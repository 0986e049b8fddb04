from django.apps import AppConfig


class TranslationConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "translation"

    def ready(self):
        from .signals import connect_translation_signals

        connect_translation_signals()
