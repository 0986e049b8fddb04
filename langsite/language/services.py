# language/services.py
from __future__ import annotations

import logging

from core.config import get_default_langcode
from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from .exceptions import LanguageStorageError
from .models import Language

logger = logging.getLogger(__name__)


class LanguageStore:
    """
    Accès au stockage des langues (load / create / save).
    """

    def load(self, code: str) -> Language | None:
        return Language.objects.filter(code=code).first()

    def create(self, *, code: str, name: str, direction: str = Language.Direction.LTR) -> Language:
        # non sauvegardée : voir save()
        return Language(code=code, name=name, direction=direction)

    def save(self, language: Language) -> Language:
        try:
            language.full_clean()
            with transaction.atomic():
                language.save()
        except ValidationError as e:
            raise LanguageStorageError("; ".join(e.messages)) from e
        except DatabaseError as e:
            raise LanguageStorageError(str(e)) from e
        logger.info("Language saved code=%s name=%s direction=%s", language.code, language.name, language.direction)
        return language


class LanguageDefault:
    """
    Référence en mémoire vers la langue par défaut du site.

    Tant que set() n'a pas été appelé, la valeur est lue depuis la configuration
    persistée (system.site / default_langcode), sinon settings.LANGUAGE_CODE.
    """

    def __init__(self, language: Language | None = None):
        self._language = language

    def get(self) -> Language:
        if self._language is None:
            code = get_default_langcode()
            # la langue peut ne pas (encore) exister en base : objet non persisté
            self._language = Language.objects.filter(code=code).first() or Language(code=code, name=code)
        return self._language

    def set(self, language: Language) -> None:
        self._language = language

    def invalidate(self) -> None:
        self._language = None


class LanguageManager:
    """
    Façade sur les langues configurées, avec cache local (reset() pour le vider).
    """

    def __init__(self, language_default: LanguageDefault):
        self.language_default = language_default
        self._languages: dict[str, Language] | None = None

    def get_default_language(self) -> Language:
        return self.language_default.get()

    def get_languages(self) -> dict[str, Language]:
        if self._languages is None:
            self._languages = {lang.code: lang for lang in Language.objects.all()}
        return self._languages

    def get_language(self, code: str) -> Language | None:
        return self.get_languages().get(code)

    def is_multilingual(self) -> bool:
        return len(self.get_languages()) > 1

    def reset(self) -> None:
        self._languages = None


language_default = LanguageDefault()
language_manager = LanguageManager(language_default)
