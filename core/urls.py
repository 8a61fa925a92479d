"""URL routing configuration for core application."""

from django.urls import path

from .views import PlaceholderListView, ReplySettingsView

urlpatterns = [
    path("settings", ReplySettingsView.as_view(), name="reply-settings"),
    path(
        "settings/placeholders",
        PlaceholderListView.as_view(),
        name="reply-settings-placeholders",
    ),
]
