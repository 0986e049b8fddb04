# language/migrator.py
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from core.config import SITE_CONFIG, ConfigFactory
from core.entity import EntityTypeDescriptor, EntityTypeManager, get_entity_translation, save_entity
from core.exceptions import EntityStorageError, InvalidPluginDefinitionError, PluginNotFoundError
from core.modules import ModuleHandler

from .models import Language
from .services import LanguageDefault, LanguageManager, LanguageStore, language_default, language_manager

logger = logging.getLogger(__name__)

TRANSLATION_MODULE = "translation"


class MigrationStatus(str, enum.Enum):
    NOOP = "noop"
    SWITCHED = "switched"


@dataclass
class MigrationResult:
    status: MigrationStatus
    language: Language | None = None
    created: bool = False
    previous_langcode: str | None = None
    retagged: dict[str, int] = field(default_factory=dict)
    translations_updated: int = 0
    failures: list[tuple[str, str]] = field(default_factory=list)

    @property
    def total_retagged(self) -> int:
        return sum(self.retagged.values())


class DefaultLanguageMigrator:
    """
    Change la langue par défaut du site et déplace le contenu existant vers celle-ci.

    Étapes (dans cet ordre, sans transaction globale ni rollback) :
      1. no-op si la langue demandée est déjà la langue par défaut ;
      2. résolution (ou création) de la langue cible ;
      3. bascule de la langue par défaut (mémoire + config "system.site") ;
      4. pour chaque type d'entité de contenu ayant un langcode : retag des entités
         qui étaient dans l'ancienne langue par défaut, puis mise à jour de la
         langue source de leurs traductions.

    Une erreur de stockage sur un type d'entité est loggée et le type est ignoré ;
    les autres types sont traités normalement.
    """

    def __init__(
        self,
        *,
        language_store: LanguageStore,
        language_default: LanguageDefault,
        language_manager: LanguageManager,
        config_factory: ConfigFactory,
        entity_type_manager: EntityTypeManager,
        module_handler: ModuleHandler,
        translation_manager=None,
    ):
        self.language_store = language_store
        self.language_default = language_default
        self.language_manager = language_manager
        self.config_factory = config_factory
        self.entity_type_manager = entity_type_manager
        self.module_handler = module_handler
        self.translation_manager = translation_manager

    @classmethod
    def create(cls, **overrides) -> DefaultLanguageMigrator:
        module_handler = overrides.pop("module_handler", None) or ModuleHandler()
        if "translation_manager" not in overrides and module_handler.module_exists(TRANSLATION_MODULE):
            from translation.services import get_translation_manager

            overrides["translation_manager"] = get_translation_manager()

        options = {
            "language_store": LanguageStore(),
            "language_default": language_default,
            "language_manager": language_manager,
            "config_factory": ConfigFactory(),
            "entity_type_manager": EntityTypeManager(),
            "module_handler": module_handler,
        }
        options.update(overrides)
        return cls(**options)

    # ---------- LANGUAGE ----------
    def resolve_language(self, langcode: str, name: str, direction=Language.Direction.LTR) -> tuple[Language, bool]:
        """
        Retourne la langue `langcode`, créée si besoin.
        Une langue existante est réutilisée telle quelle (name/direction ignorés).
        Lève LanguageStorageError si la création échoue.
        """
        language = self.language_store.load(langcode)
        if language is not None:
            return language, False

        language = self.language_store.create(
            code=langcode,
            name=name,
            direction=Language.normalize_direction(direction),
        )
        self.language_store.save(language)
        logger.info('Created "%s" language.', langcode)
        return language, True

    def switch_default(self, language: Language) -> None:
        self.language_default.set(language)
        self.config_factory.get_editable(SITE_CONFIG).set("default_langcode", language.code).save()
        self.language_manager.reset()
        logger.info("Default language switched to %s", language.code)

    # ---------- RUN ----------
    def run(self, langcode: str, name: str, direction=Language.Direction.LTR) -> MigrationResult:
        if langcode == self.language_default.get().code:
            logger.info("Language %s is already the default, nothing to do", langcode)
            return MigrationResult(status=MigrationStatus.NOOP)

        previous_default = self.language_manager.get_default_language()
        language, created = self.resolve_language(langcode, name, direction)
        self.switch_default(language)

        result = MigrationResult(
            status=MigrationStatus.SWITCHED,
            language=language,
            created=created,
            previous_langcode=previous_default.code,
        )

        for type_id, entity_type in self.entity_type_manager.get_definitions().items():
            if not entity_type.is_content_entity():
                continue
            if not entity_type.has_key("langcode"):
                continue

            try:
                self.retag_entities(type_id, entity_type, previous_default, language, result)
            except (InvalidPluginDefinitionError, PluginNotFoundError, EntityStorageError) as e:
                logger.error(str(e))
                result.failures.append((type_id, str(e)))

        logger.info(
            "Default language migration done %s -> %s retagged=%s translations=%s failures=%s",
            result.previous_langcode, language.code, result.total_retagged,
            result.translations_updated, len(result.failures),
        )
        return result

    # ---------- ENTITIES ----------
    def retag_entities(
        self,
        type_id: str,
        entity_type: EntityTypeDescriptor,
        previous_default: Language,
        language: Language,
        result: MigrationResult,
    ) -> None:
        storage = self.entity_type_manager.get_storage(type_id)
        key = entity_type.get_key("langcode")
        result.retagged.setdefault(type_id, 0)

        for entity in storage.load_multiple().values():
            # Traductions asymétriques : un contenu créé dans une autre langue
            # que l'ancienne langue par défaut garde son langcode (ex: blocs inline).
            if getattr(entity, key) != previous_default.code:
                continue

            setattr(entity, key, language.code)
            storage.save(entity)
            result.retagged[type_id] += 1
            result.translations_updated += self.update_translations(entity, entity_type, language)

    def candidate_langcodes(self, language: Language) -> list[str]:
        if not self.language_manager.is_multilingual():
            return []
        return [code for code in self.language_manager.get_languages() if code != language.code]

    def update_translations(self, entity, entity_type: EntityTypeDescriptor, language: Language) -> int:
        """
        Met la langue source de toutes les traductions existantes de `entity`
        (dans les autres langues) à la nouvelle langue par défaut, quelle que
        soit leur source précédente. Retourne le nombre de traductions modifiées.
        """
        langcodes = self.candidate_langcodes(language)

        if self.translation_manager is None:
            return 0
        if not (entity_type.is_translatable() and self.module_handler.module_exists(TRANSLATION_MODULE)):
            return 0

        updated = 0
        for langcode in langcodes:
            translation = get_entity_translation(entity, langcode)
            if translation is None:
                continue
            self.translation_manager.get_translation_metadata(translation).set_source(language.code)
            save_entity(translation)
            updated += 1
        return updated
