# core/models.py
from django.db import models
from django.utils.translation import gettext_lazy as _

from .entity import EntityKind


def default_langcode() -> str:
    from .config import get_default_langcode

    return get_default_langcode()


class SiteConfig(models.Model):
    """
    Objet de configuration nommé (ex: "system.site"), contenu JSON.
    """

    entity_kind = EntityKind.CONFIG

    name = models.CharField(_("name"), max_length=100, unique=True)
    data = models.JSONField(_("data"), default=dict, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["name"]
        verbose_name = _("Configuration")
        verbose_name_plural = _("Configurations")

    def __str__(self):
        return self.name


class ContentEntity(models.Model):
    """
    Base des entités de contenu : porte le tag de langue `langcode`.
    Les modèles concrets combinent cette base avec parler.TranslatableModel.
    """

    entity_kind = EntityKind.CONTENT
    entity_keys = {"id": "id", "langcode": "langcode"}

    langcode = models.CharField(
        _("language"),
        max_length=12,
        default=default_langcode,
        db_index=True,
        help_text=_("Langue dans laquelle le contenu a été rédigé"),
    )

    class Meta:
        abstract = True
