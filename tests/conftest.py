"""Pytest configuration and shared fixtures."""

import os

import django

import pytest

# Configure Django settings for tests
os.environ.setdefault(
    "DJANGO_SETTINGS_MODULE", "reply_notification_service.settings_test"
)
django.setup()


@pytest.fixture
def api_client():
    """Provide DRF test client."""
    from rest_framework.test import APIClient  # noqa: PLC0415

    return APIClient()


@pytest.fixture
def admin_client(api_client, django_user_model):
    """Provide a DRF client authenticated as a staff user."""
    user = django_user_model.objects.create_user(
        username="admin",
        password="password",
        is_staff=True,
    )
    api_client.force_authenticate(user=user)
    return api_client
