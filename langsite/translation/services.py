# translation/services.py
from __future__ import annotations

import logging

from core.exceptions import EntityStorageError
from django.contrib.contenttypes.models import ContentType
from django.db import DatabaseError, transaction

from .models import TranslationMetadata

logger = logging.getLogger(__name__)


class TranslationMetadataHandler:
    """
    Accès aux métadonnées d'une traduction parler (objet `translation`,
    instance du modèle de traduction avec `master` et `language_code`).
    """

    def __init__(self, translation):
        self.translation = translation
        self.master = translation.master
        self.language_code = translation.language_code

    def _lookup(self) -> dict:
        return {
            "content_type": ContentType.objects.get_for_model(self.master),
            "object_id": self.master.pk,
            "language_code": self.language_code,
        }

    def get_source(self) -> str | None:
        row = TranslationMetadata.objects.filter(**self._lookup()).only("source").first()
        return row.source if row else None

    def set_source(self, langcode: str) -> TranslationMetadataHandler:
        try:
            with transaction.atomic():
                TranslationMetadata.objects.update_or_create(**self._lookup(), defaults={"source": langcode})
        except DatabaseError as e:
            raise EntityStorageError(
                f"Unable to set source of {self.master.__class__.__name__} #{self.master.pk} "
                f"[{self.language_code}]: {e}"
            ) from e
        logger.debug(
            "Translation source set model=%s id=%s lang=%s source=%s",
            self.master._meta.label_lower, self.master.pk, self.language_code, langcode,
        )
        return self


class ContentTranslationManager:
    def get_translation_metadata(self, translation) -> TranslationMetadataHandler:
        return TranslationMetadataHandler(translation)

    def is_enabled(self, model) -> bool:
        return getattr(model, "_parler_meta", None) is not None and getattr(model, "entity_kind", None) is not None


content_translation_manager = ContentTranslationManager()


def get_translation_manager() -> ContentTranslationManager:
    return content_translation_manager
