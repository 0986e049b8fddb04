# translation/models.py
from django.contrib.contenttypes.models import ContentType
from django.db import models
from django.utils.translation import gettext_lazy as _


class TranslationMetadata(models.Model):
    """
    Métadonnées d'une traduction (parler) d'une entité de contenu :
    la langue source à partir de laquelle elle a été traduite.
    """

    content_type = models.ForeignKey(ContentType, on_delete=models.CASCADE)
    object_id = models.PositiveBigIntegerField()
    language_code = models.CharField(_("language"), max_length=15, db_index=True)
    source = models.CharField(
        _("source language"),
        max_length=15,
        blank=True,
        help_text=_("Vide si la traduction est la version originale"),
    )
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        unique_together = [("content_type", "object_id", "language_code")]
        ordering = ["content_type", "object_id", "language_code"]
        verbose_name = _("Translation metadata")
        verbose_name_plural = _("Translation metadata")

    def __str__(self):
        return f"{self.content_type.model}#{self.object_id} [{self.language_code}] ← {self.source or '-'}"
