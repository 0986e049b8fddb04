# langsite/settings.py
from pathlib import Path

from decouple import Csv, config

# =============================================================================
# PATHS
# =============================================================================
BASE_DIR = Path(__file__).resolve().parent.parent
RUNTIME_DIR = Path(config("RUNTIME_DIR", default=str(BASE_DIR.parent / "runtime")))
LOG_DIR = RUNTIME_DIR / "logs"

# =============================================================================
# CORE SETTINGS
# =============================================================================
SECRET_KEY = config("SECRET_KEY", default="django-insecure-langsite-dev-key")
DEBUG = config("DEBUG", default=False, cast=bool)
ALLOWED_HOSTS = config("ALLOWED_HOSTS", default="localhost,127.0.0.1", cast=Csv())

# =============================================================================
# APPS
# =============================================================================
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",

    "rest_framework",
    "django_filters",
    "drf_spectacular",
    "parler",

    # local apps
    "core",
    "language",
    "translation",
    "domain",
    "subject",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.locale.LocaleMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "langsite.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "langsite.wsgi.application"

# =============================================================================
# DATABASES
# =============================================================================
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": config("DATABASE_NAME", default=str(BASE_DIR / "db.sqlite3")),
    }
}

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# =============================================================================
# I18N
# =============================================================================
# Langue par défaut initiale : remplacée par system.site/default_langcode
# dès que la commande set_default_language a été lancée.
LANGUAGE_CODE = config("LANGUAGE_CODE", default="en")
TIME_ZONE = "Europe/Brussels"
USE_I18N = True
USE_TZ = True

LANGUAGES = (
    ("en", "English"),
    ("fr", "Français"),
    ("nl", "Nederlands"),
    ("de", "Deutsch"),
    ("it", "Italiano"),
    ("es", "Español"),
    ("ar", "العربية"),
)

PARLER_LANGUAGES = {
    None: tuple({"code": code} for code, _name in LANGUAGES),
    "default": {
        "fallbacks": [LANGUAGE_CODE],
        "hide_untranslated": False,
    },
}

# =============================================================================
# REST FRAMEWORK
# =============================================================================
REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework.authentication.SessionAuthentication",
        "rest_framework.authentication.BasicAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.IsAuthenticated",
    ],
    "DEFAULT_FILTER_BACKENDS": ["django_filters.rest_framework.DjangoFilterBackend"],
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "langsite API",
    "DESCRIPTION": "Languages of the site and default language",
    "VERSION": "1.0.0",
}

SENSITIVE_FIELDS = ("password", "token", "secret", "authorization")

# =============================================================================
# STATIC
# =============================================================================
STATIC_URL = "/static/"
STATIC_ROOT = RUNTIME_DIR / "staticfiles"

# =============================================================================
# LOGGING
# =============================================================================
LOG_TO_FILE = config("LOG_TO_FILE", default=False, cast=bool)
LOG_LEVEL = config("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "%(asctime)s [%(levelname)s] %(name)s %(pathname)s:%(lineno)d\n%(message)s",
        },
        "simple": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        },
    },
    "handlers": {
        "console": {
            "level": "DEBUG",
            "class": "logging.StreamHandler",
            "formatter": "simple",
        },
    },
    "loggers": {
        "django": {
            "handlers": ["console"],
            "level": "INFO",
            "propagate": False,
        },
        "langsite": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "core": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "language": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "translation": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
    "root": {
        "handlers": ["console"],
        "level": "WARNING",
    },
}

if LOG_TO_FILE:
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    LOGGING["handlers"]["error_file"] = {
        "level": "WARNING",
        "class": "logging.handlers.RotatingFileHandler",
        "filename": LOG_DIR / "errors.log",
        "formatter": "verbose",
        "maxBytes": 30 * 1024 * 1024,
        "backupCount": 3,
        "encoding": "utf-8",
    }
    for logger_config in LOGGING["loggers"].values():
        logger_config["handlers"].append("error_file")
    LOGGING["root"]["handlers"].append("error_file")
