from rest_framework import serializers

from .models import Language


class LanguageReadSerializer(serializers.ModelSerializer):
    class Meta:
        model = Language
        fields = [
            "id",
            "code",
            "name",
            "direction",
            "active",
        ]
        read_only_fields = fields


class LanguageWriteSerializer(serializers.ModelSerializer):
    class Meta:
        model = Language
        fields = [
            "id",
            "code",
            "name",
            "direction",
            "active",
        ]
        read_only_fields = ["id"]

    def validate_code(self, value: str) -> str:
        v = (value or "").strip().lower()

        # ex: fr, nl, en, fr-be
        if len(v) < 2 or len(v) > 12:
            raise serializers.ValidationError("Code de langue invalide (ex: fr, nl, en).")
        return v
