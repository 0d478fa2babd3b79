# config/settings/prod.py
import os

from .base import *  # noqa

DEBUG = False

CORS_ALLOW_ALL_ORIGINS = False
CORS_ALLOWED_ORIGINS = [o for o in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",") if o]

SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SESSION_COOKIE_SECURE = True
CSRF_COOKIE_SECURE = True

DATABASES["default"]["CONN_MAX_AGE"] = int(os.getenv("DJANGO_DB_CONN_MAX_AGE", "0"))  # noqa: F405
if os.getenv("DB_SSLMODE"):
    DATABASES["default"].setdefault("OPTIONS", {})["sslmode"] = os.getenv("DB_SSLMODE")  # noqa: F405

LOGGING["loggers"]["django"]["level"] = os.getenv("DJANGO_LOG_LEVEL", "WARNING")  # noqa: F405
