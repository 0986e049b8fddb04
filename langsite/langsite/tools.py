import logging

from django.conf import settings
from django.http import Http404
from drf_spectacular.utils import inline_serializer
from rest_framework import serializers
from rest_framework import viewsets
from rest_framework.exceptions import NotFound, ParseError, UnsupportedMediaType

logger = logging.getLogger(__name__)

MASK = "***MASKED***"

ErrorDetailSerializer = inline_serializer(
    name="ErrorDetail",
    fields={
        "detail": serializers.CharField(required=False),
    },
)


def mask_sensitive_data(data):
    sensitive = {f.lower() for f in getattr(settings, "SENSITIVE_FIELDS", ())}
    if isinstance(data, dict):
        return {
            key: MASK if str(key).lower() in sensitive else mask_sensitive_data(value)
            for key, value in data.items()
        }
    if isinstance(data, list):
        return [mask_sensitive_data(item) for item in data]
    return data


class AuditedModelViewSet(viewsets.ModelViewSet):
    """
    ModelViewSet qui trace chaque écriture (payload masqué) puis appelle
    `on_change(instance)` : le point d'accroche pour invalider les caches
    dépendant du modèle.
    """

    def on_change(self, instance):
        pass

    def log_action(self, instance=None, **extra):
        request = self.request
        try:
            payload = mask_sensitive_data(request.data)
        except (ParseError, UnsupportedMediaType):
            payload = "<unreadable>"

        logger.info(
            "%s %s action=%s user=%s pk=%s payload=%s extra=%s",
            request.method,
            request.path,
            getattr(self, "action", None),
            getattr(getattr(request, "user", None), "id", None),
            getattr(instance, "pk", None),
            payload,
            extra,
        )

    def perform_create(self, serializer):
        super().perform_create(serializer)
        self.log_action(serializer.instance)
        self.on_change(serializer.instance)

    def perform_update(self, serializer):
        super().perform_update(serializer)
        self.log_action(serializer.instance)
        self.on_change(serializer.instance)

    def perform_destroy(self, instance):
        pk = instance.pk
        super().perform_destroy(instance)
        self.log_action(deleted=pk)
        self.on_change(instance)

    def handle_exception(self, exc):
        # 404 Django => NotFound DRF
        if isinstance(exc, Http404):
            exc = NotFound()
        logger.warning(
            "%s in %s (action=%s, user=%s)",
            exc.__class__.__name__,
            self.__class__.__name__,
            getattr(self, "action", None),
            getattr(getattr(self.request, "user", None), "id", None),
        )
        return super().handle_exception(exc)
