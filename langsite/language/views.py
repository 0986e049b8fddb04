from django_filters.rest_framework import DjangoFilterBackend
from drf_spectacular.utils import (
    extend_schema,
    extend_schema_view,
    OpenApiParameter,
    OpenApiResponse,
    OpenApiTypes,
)
from langsite.tools import AuditedModelViewSet, ErrorDetailSerializer
from rest_framework import filters
from rest_framework.decorators import action
from rest_framework.permissions import IsAdminUser
from rest_framework.response import Response

from .models import Language
from .serializers import LanguageReadSerializer, LanguageWriteSerializer
from .services import language_manager

LANG_ID_PARAMETER = OpenApiParameter(
    name="lang_id",
    type=OpenApiTypes.INT,
    location=OpenApiParameter.PATH,
    required=True,
    description="ID de la langue.",
)

FORBIDDEN = OpenApiResponse(response=ErrorDetailSerializer, description="Forbidden (admin only)")
NOT_FOUND = OpenApiResponse(response=ErrorDetailSerializer, description="Not found")


@extend_schema_view(
    list=extend_schema(
        tags=["Language"],
        summary="Lister les langues",
        description=(
                "Liste des langues.\n\n"
                "Supporte :\n"
                "- `search` (DRF SearchFilter sur `code`, `name`)\n"
                "- `ordering` (DRF OrderingFilter sur `code`, `name`, `id`)\n"
                "- `direction`, `active` (filtres exacts)\n"
        ),
        responses={200: LanguageReadSerializer(many=True), 403: FORBIDDEN},
    ),
    retrieve=extend_schema(
        tags=["Language"],
        summary="Récupérer une langue",
        parameters=[LANG_ID_PARAMETER],
        responses={200: LanguageReadSerializer, 404: NOT_FOUND, 403: FORBIDDEN},
    ),
    create=extend_schema(
        tags=["Language"],
        summary="Créer une langue",
        request=LanguageWriteSerializer,
        responses={
            201: LanguageReadSerializer,
            400: OpenApiResponse(description="Validation error"),
            403: FORBIDDEN,
        },
    ),
    update=extend_schema(
        tags=["Language"],
        summary="Mettre à jour une langue (PUT)",
        parameters=[LANG_ID_PARAMETER],
        request=LanguageWriteSerializer,
        responses={200: LanguageReadSerializer, 400: OpenApiResponse(description="Validation error"),
                   404: NOT_FOUND, 403: FORBIDDEN},
    ),
    partial_update=extend_schema(
        tags=["Language"],
        summary="Mettre à jour une langue (PATCH)",
        parameters=[LANG_ID_PARAMETER],
        request=LanguageWriteSerializer,
        responses={200: LanguageReadSerializer, 400: OpenApiResponse(description="Validation error"),
                   404: NOT_FOUND, 403: FORBIDDEN},
    ),
    destroy=extend_schema(
        tags=["Language"],
        summary="Supprimer une langue",
        parameters=[LANG_ID_PARAMETER],
        responses={204: OpenApiResponse(description="No Content"), 404: NOT_FOUND, 403: FORBIDDEN},
    ),
)
class LanguageViewSet(AuditedModelViewSet):
    queryset = Language.objects.all().order_by("code")
    permission_classes = [IsAdminUser]

    filter_backends = [DjangoFilterBackend, filters.SearchFilter, filters.OrderingFilter]
    filterset_fields = ["direction", "active"]
    search_fields = ["code", "name"]
    ordering_fields = ["code", "name", "id"]
    ordering = ["code"]
    lookup_field = "pk"
    lookup_url_kwarg = "lang_id"

    def get_serializer_class(self):
        if self.action in ["list", "retrieve", "default"]:
            return LanguageReadSerializer
        return LanguageWriteSerializer

    def on_change(self, instance):
        language_manager.reset()

    @extend_schema(
        tags=["Language"],
        summary="Langue par défaut",
        description="Langue par défaut courante du site (non persistée si elle n'existe pas encore en base).",
        responses={200: LanguageReadSerializer, 403: FORBIDDEN},
    )
    @action(detail=False, methods=["get"], url_path="default")
    def default(self, request):
        language = language_manager.get_default_language()
        self.log_action(code=language.code)
        return Response(LanguageReadSerializer(language).data)
