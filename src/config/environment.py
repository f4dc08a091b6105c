"""Environment validation.

Fail fast at startup: unknown environments are rejected, and production
must provide its own database URL and secret key instead of the local
fallbacks used for development and tests.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

APP_ENVIRONMENTS = ("local", "development", "test", "production")


def validate_environment(
    app_env: str, database_url: str | None, secret_key: str | None
) -> str:
    """Return the normalised environment name or raise ``ImproperlyConfigured``."""
    env = (app_env or "development").strip().lower()
    if env not in APP_ENVIRONMENTS:
        raise ImproperlyConfigured(
            f"APP_ENV must be one of {', '.join(APP_ENVIRONMENTS)}; got {app_env!r}."
        )
    if env == "production":
        if not database_url:
            raise ImproperlyConfigured("DATABASE_URL is required when APP_ENV=production.")
        if not secret_key:
            raise ImproperlyConfigured("SECRET_KEY is required when APP_ENV=production.")
    return env
