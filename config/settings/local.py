# config/settings/local.py
import os

from .base import *  # noqa

DEBUG = os.getenv("DJANGO_DEBUG", "1") == "1"

# SQLite unless a database engine is configured explicitly
if not os.getenv("DB_ENGINE"):
    DATABASES = {
        "default": {
            "ENGINE": "django.db.backends.sqlite3",
            "NAME": os.getenv("DB_NAME", str(BASE_DIR / "db.sqlite3")),  # noqa: F405
        }
    }
