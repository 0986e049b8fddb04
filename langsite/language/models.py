# language/models.py
from core.entity import EntityKind
from django.db import models
from django.utils.translation import gettext_lazy as _


class Language(models.Model):
    """
    Langue disponible dans l'application.
    Sert de référentiel pour la langue par défaut et les traductions du contenu.
    """

    class Direction(models.TextChoices):
        LTR = "ltr", _("Left to right")
        RTL = "rtl", _("Right to left")

    entity_kind = EntityKind.CONFIG

    code = models.CharField(
        _("code"),
        max_length=12,
        unique=True,
        help_text=_("Code ISO (ex: fr, nl, en, fr-BE)")
    )

    name = models.CharField(
        _("name"),
        max_length=100,
        help_text=_("Nom lisible (ex: Français, Nederlands, English)")
    )

    direction = models.CharField(
        _("direction"),
        max_length=3,
        choices=Direction.choices,
        default=Direction.LTR,
    )

    active = models.BooleanField(
        _("active"),
        default=True,
        help_text=_("Langue disponible pour la saisie et l'affichage")
    )

    class Meta:
        ordering = ["code"]
        verbose_name = _("Language")
        verbose_name_plural = _("Languages")

    def __str__(self):
        return f"{self.code} — {self.name}"

    @classmethod
    def normalize_direction(cls, direction) -> str:
        # toute valeur inconnue (ou absente) => ltr
        return direction if direction in cls.Direction.values else cls.Direction.LTR.value
