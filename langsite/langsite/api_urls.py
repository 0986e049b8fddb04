# langsite/api_urls.py
from django.urls import path, include

app_name = 'api'
urlpatterns = [
    path("language/", include(("language.api_urls", "lang-api"), namespace="lang-api")),
]
