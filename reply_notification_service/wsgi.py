"""WSGI config for the comment reply notification service.

Exposes the WSGI callable as a module-level variable named ``application``.
"""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "reply_notification_service.settings")

application = get_wsgi_application()
