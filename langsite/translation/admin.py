from django.contrib import admin

from .models import TranslationMetadata


@admin.register(TranslationMetadata)
class TranslationMetadataAdmin(admin.ModelAdmin):
    list_display = ("id", "content_type", "object_id", "language_code", "source", "updated_at")
    list_filter = ("content_type", "language_code", "source")
    search_fields = ("object_id",)
    readonly_fields = ("updated_at",)
