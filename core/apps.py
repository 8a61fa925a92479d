"""Django application configuration for core."""

import logging

from django.apps import AppConfig

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """Configuration class for the core application."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "core"

    def ready(self) -> None:
        """Connect comment signal receivers when Django app is ready."""
        import core.signals  # noqa: PLC0415

        del core.signals

        logger.info("Comment reply notification receivers connected")
