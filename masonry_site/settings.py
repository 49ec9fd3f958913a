"""Settings for running the masonry app inside a minimal Django project."""

from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent

env = environ.Env(
    DEBUG=(bool, False),
    ALLOWED_HOSTS=(list, []),
)
environ.Env.read_env(BASE_DIR / ".env")

SECRET_KEY = env("SECRET_KEY")
DEBUG = env("DEBUG")
ALLOWED_HOSTS = env("ALLOWED_HOSTS")

INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "crispy_forms",
    "masonry",
]

DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

MIDDLEWARE = []
TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "APP_DIRS": True,
    }
]
USE_TZ = True
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

CRISPY_TEMPLATE_PACK = env("CRISPY_TEMPLATE_PACK", default="bootstrap5")

MASONRY_COLUMN_UNIT = env("MASONRY_COLUMN_UNIT", default="pixel")
MASONRY_GUTTER = env.int("MASONRY_GUTTER", default=10)
MASONRY_HORIZONTAL_ORDER = env.bool("MASONRY_HORIZONTAL_ORDER", default=True)
MASONRY_GRID_CLASS_HOOKS = env.list("MASONRY_GRID_CLASS_HOOKS", default=[])

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "handlers": {
        "console": {"class": "logging.StreamHandler"},
    },
    "loggers": {
        "masonry": {
            "handlers": ["console"],
            "level": env("MASONRY_LOG_LEVEL", default="INFO"),
        },
    },
}
