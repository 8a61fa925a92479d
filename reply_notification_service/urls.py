"""Root URL configuration for the comment reply notification service."""

from django.urls import include, path

urlpatterns = [
    path("", include("core.urls")),
]
