# translation/signals.py
import logging

from django.apps import apps
from django.db.models.signals import post_save

from .services import content_translation_manager

logger = logging.getLogger(__name__)


def record_translation_source(sender, instance, created, raw=False, **kwargs):
    """
    À la création d'une traduction, enregistre sa langue source :
    la langue de l'entité, ou vide si c'est la traduction d'origine.
    """
    if raw or not created:
        return

    master = instance.master
    source = getattr(master, "langcode", "") or ""
    if source == instance.language_code:
        source = ""

    handler = content_translation_manager.get_translation_metadata(instance)
    if handler.get_source() is None:
        handler.set_source(source)


def connect_translation_signals():
    for model in apps.get_models():
        if not content_translation_manager.is_enabled(model):
            continue
        translation_model = model._parler_meta.root_model
        post_save.connect(
            record_translation_source,
            sender=translation_model,
            dispatch_uid=f"translation_source_{translation_model._meta.label_lower}",
        )
        logger.debug("Translation source tracking enabled for %s", model._meta.label_lower)
