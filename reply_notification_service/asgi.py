"""ASGI config for the comment reply notification service.

Exposes the ASGI callable as a module-level variable named ``application``.
"""

import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "reply_notification_service.settings")

application = get_asgi_application()
