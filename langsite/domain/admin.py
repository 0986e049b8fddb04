from django.contrib import admin
from django.utils.translation import gettext_lazy as _
from parler.admin import TranslatableAdmin

from .models import Domain


@admin.register(Domain)
class DomainAdmin(TranslatableAdmin):
    list_display = ("id", "name_any", "langcode", "active", "created_at", "updated_at")
    list_filter = ("active", "langcode")
    search_fields = ("translations__name", "translations__description")
    ordering = ("id",)

    readonly_fields = ("created_at", "updated_at")

    fieldsets = (
        (None, {"fields": ("name", "description", "active")}),
        (_("Language"), {"fields": ("langcode",)}),
        (_("Timestamps"), {"fields": ("created_at", "updated_at")}),
    )

    def name_any(self, obj: Domain) -> str:
        return obj.safe_translation_getter("name", any_language=True) or ""

    name_any.short_description = _("name")
