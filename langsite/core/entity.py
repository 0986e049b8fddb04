# core/entity.py
from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from django.apps import apps
from django.db import DatabaseError, transaction

from .exceptions import EntityStorageError, InvalidPluginDefinitionError, PluginNotFoundError

logger = logging.getLogger(__name__)


class EntityKind(str, enum.Enum):
    CONTENT = "content"
    CONFIG = "config"


@dataclass(frozen=True)
class EntityTypeDescriptor:
    """
    Description d'un type d'entité (un modèle Django qui déclare `entity_kind`).

    - kind        : contenu ou configuration (flag explicite, pas d'introspection de classe)
    - keys        : nom logique -> nom du champ (ex: {"langcode": "langcode"})
    - translatable: modèle parler (TranslatableModel)
    """

    id: str
    model: type
    kind: EntityKind
    keys: dict = field(default_factory=dict)

    @classmethod
    def from_model(cls, model) -> EntityTypeDescriptor:
        return cls(
            id=model._meta.label_lower,
            model=model,
            kind=EntityKind(model.entity_kind),
            keys=dict(getattr(model, "entity_keys", {}) or {}),
        )

    def is_content_entity(self) -> bool:
        return self.kind is EntityKind.CONTENT

    def get_key(self, key: str) -> str | None:
        return self.keys.get(key)

    def has_key(self, key: str) -> bool:
        field_name = self.get_key(key)
        if not field_name:
            return False
        return any(f.name == field_name for f in self.model._meta.get_fields())

    def is_translatable(self) -> bool:
        return getattr(self.model, "_parler_meta", None) is not None


def save_entity(obj) -> None:
    """
    Sauvegarde une entité (ou une traduction) dans son propre savepoint.
    Les erreurs base de données sont remontées en EntityStorageError.
    """
    try:
        with transaction.atomic():
            obj.save()
    except DatabaseError as e:
        raise EntityStorageError(f"{obj.__class__.__name__} #{obj.pk}: {e}") from e


def get_entity_translation(entity, langcode: str):
    """
    Traduction parler `langcode` de l'entité, ou None si elle n'existe pas.
    Les erreurs base de données sont remontées en EntityStorageError.
    """
    try:
        if not entity.has_translation(langcode):
            return None
        return entity.get_translation(langcode)
    except DatabaseError as e:
        raise EntityStorageError(f"{entity.__class__.__name__} #{entity.pk} ({langcode}): {e}") from e


class EntityStorage:
    def __init__(self, entity_type: EntityTypeDescriptor):
        self.entity_type = entity_type

    @property
    def type_id(self) -> str:
        return self.entity_type.id

    def get_queryset(self):
        return self.entity_type.model._default_manager.all()

    def load_multiple(self) -> dict:
        """
        Charge toutes les entités du type : {pk: entity}.
        Pas de pagination : tout est chargé en mémoire.
        """
        try:
            return {obj.pk: obj for obj in self.get_queryset()}
        except DatabaseError as e:
            raise EntityStorageError(f"Unable to load {self.type_id} entities: {e}") from e

    def save(self, entity) -> None:
        save_entity(entity)


class EntityTypeManager:
    """
    Registre des types d'entités, construit à partir du registre des apps Django.
    """

    storage_class = EntityStorage

    def get_definitions(self) -> dict[str, EntityTypeDescriptor]:
        definitions = {}
        for model in apps.get_models():
            if getattr(model, "entity_kind", None) is None:
                continue
            descriptor = EntityTypeDescriptor.from_model(model)
            definitions[descriptor.id] = descriptor
        return definitions

    def get_definition(self, type_id: str) -> EntityTypeDescriptor:
        definition = self.get_definitions().get(type_id)
        if definition is None:
            raise PluginNotFoundError(f'The "{type_id}" entity type does not exist.')
        return definition

    def get_storage(self, type_id: str) -> EntityStorage:
        definition = self.get_definition(type_id)
        meta = definition.model._meta
        if meta.abstract or meta.swapped or getattr(definition.model, "_default_manager", None) is None:
            raise InvalidPluginDefinitionError(f'The "{type_id}" entity type did not specify a storage.')
        logger.debug("Storage resolved for %s", type_id)
        return self.storage_class(definition)
