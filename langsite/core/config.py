# core/config.py
from __future__ import annotations

import copy
import logging

from django.conf import settings
from django.db import DatabaseError, transaction

logger = logging.getLogger(__name__)

SITE_CONFIG = "system.site"


class ImmutableConfig:
    """
    Vue en lecture seule d'un objet de configuration (ex: "system.site").
    """

    def __init__(self, name: str, data: dict | None = None):
        self.name = name
        self._data = dict(data or {})

    def get(self, key: str, default=None):
        return self._data.get(key, default)

    def get_raw_data(self) -> dict:
        return copy.deepcopy(self._data)

    def is_new(self) -> bool:
        return not self._data


class EditableConfig(ImmutableConfig):
    """
    Configuration modifiable: set() est chaînable, save() persiste en base.

        factory.get_editable("system.site").set("default_langcode", "fr").save()
    """

    def set(self, key: str, value) -> EditableConfig:
        self._data[key] = value
        return self

    def clear(self, key: str) -> EditableConfig:
        self._data.pop(key, None)
        return self

    def save(self) -> EditableConfig:
        from core.models import SiteConfig

        try:
            with transaction.atomic():
                SiteConfig.objects.update_or_create(name=self.name, defaults={"data": self._data})
        except DatabaseError:
            logger.exception("Unable to save configuration %s", self.name)
            raise
        logger.info("Configuration saved name=%s keys=%s", self.name, sorted(self._data))
        return self


class ConfigFactory:
    """
    Accès aux objets de configuration stockés dans core.SiteConfig.
    """

    def _load(self, name: str) -> dict:
        from core.models import SiteConfig

        row = SiteConfig.objects.filter(name=name).only("data").first()
        return row.data if row else {}

    def get(self, name: str) -> ImmutableConfig:
        return ImmutableConfig(name, self._load(name))

    def get_editable(self, name: str) -> EditableConfig:
        return EditableConfig(name, self._load(name))


def get_default_langcode() -> str:
    """
    Code de la langue par défaut persistée, sinon settings.LANGUAGE_CODE.
    """
    return ConfigFactory().get(SITE_CONFIG).get("default_langcode") or settings.LANGUAGE_CODE
