"""Reply notification settings stored in the host options table.

Both templates live in a single option (``ng_crn_settings``) holding a
``{"subject": ..., "message": ...}`` mapping. Keys missing from the saved
mapping fall back to computed defaults; a saved empty string is returned
as-is.
"""

import re
from typing import Any

from django.conf import settings
from django.utils.html import strip_tags
from django.utils.translation import gettext as _

import nh3
import structlog

from core.constants import SETTINGS_OPTION_NAME, SITE_NAME_OPTION
from core.repositories import OptionRepository

logger = structlog.get_logger(__name__)

SETTING_KEYS = ("subject", "message")

# Inline tags a site owner may use in the message template.
ALLOWED_MESSAGE_TAGS = {
    "a",
    "abbr",
    "acronym",
    "b",
    "blockquote",
    "cite",
    "code",
    "del",
    "em",
    "i",
    "q",
    "s",
    "strike",
    "strong",
}

ALLOWED_MESSAGE_ATTRIBUTES = {
    "a": {"href", "title"},
    "abbr": {"title"},
    "acronym": {"title"},
    "blockquote": {"cite"},
    "del": {"datetime"},
    "q": {"cite"},
}

_WHITESPACE_RUN = re.compile(r"[\r\n\t ]+")


def sanitize_text_field(value: Any) -> str:
    """Reduce user input to a single line of plain text.

    Strips HTML tags, collapses line breaks, tabs and repeated spaces, and
    trims the result.
    """
    text = strip_tags(str(value))
    text = _WHITESPACE_RUN.sub(" ", text)
    return text.strip()


def sanitize_html(value: Any) -> str:
    """Filter HTML through the message tag allow-list."""
    return nh3.clean(
        str(value),
        tags=ALLOWED_MESSAGE_TAGS,
        attributes=ALLOWED_MESSAGE_ATTRIBUTES,
        link_rel=None,
    )


class ReplySettingsService:
    """Service for reading and saving the reply notification templates."""

    def __init__(self, option_repository: OptionRepository | None = None) -> None:
        """Initialize settings service.

        Args:
            option_repository: Options store (defaults to OptionRepository).
        """
        self.option_repository = option_repository or OptionRepository()

    def get_site_name(self) -> str:
        """Return the site name as plain text.

        Uses the host ``blogname`` option, falling back to the SITE_NAME
        setting when the option is absent.
        """
        site_name = self.option_repository.get_option(
            SITE_NAME_OPTION, settings.SITE_NAME
        )
        return strip_tags(str(site_name or "")).strip()

    def get_option(self, key: str) -> str:
        """Get the saved value of a setting, or its default when not saved.

        Args:
            key: Setting to retrieve (``subject`` or ``message``).

        Returns:
            The saved value, even if empty, or the computed default.
        """
        saved = self.option_repository.get_option(SETTINGS_OPTION_NAME, {})

        if not isinstance(saved, dict) or key not in saved:
            return self.get_default(key)

        return saved[key]

    def get_default(self, key: str) -> str:
        """Get the default value for a setting.

        Args:
            key: Setting to retrieve the default value of.

        Returns:
            The default, or an empty string for unknown keys.
        """
        site_name = self.get_site_name()

        if key == "subject":
            return _("There's a reply to your comment on {site_name}").format(
                site_name=site_name
            )

        if key == "message":
            return _(
                "There's a new reply to your comment over on {site_name}. "
                "As a reminder, here's your original comment on the post "
                '<a href="%post_url%">%post_title%</a>:\n\n'
                "<blockquote>%original_comment_content%</blockquote>\n\n"
                "And here's the new reply from %reply_comment_author%:\n\n"
                "<blockquote>%reply_comment_content%</blockquote>\n\n"
                "You can respond to the comment here: "
                '<a href="%reply_comment_url%">%reply_comment_url%</a> \n\n'
                "Let's keep the conversation going!"
            ).format(site_name=site_name)

        return ""

    def get_settings(self) -> dict[str, str]:
        """Return every setting with defaults applied."""
        return {key: self.get_option(key) for key in SETTING_KEYS}

    def sanitize_settings(self, data: dict[str, Any]) -> dict[str, str]:
        """Sanitize settings before they are saved.

        Missing or empty fields are stored as empty strings.

        Args:
            data: Raw submitted values.

        Returns:
            Sanitized ``{"subject": ..., "message": ...}`` mapping.
        """
        sanitized = {"subject": "", "message": ""}

        if data.get("subject"):
            sanitized["subject"] = sanitize_text_field(data["subject"])

        if data.get("message"):
            sanitized["message"] = sanitize_html(data["message"])

        return sanitized

    def save_settings(self, data: dict[str, Any]) -> dict[str, str]:
        """Sanitize and persist the settings.

        Args:
            data: Raw submitted values.

        Returns:
            The values that were stored.
        """
        sanitized = self.sanitize_settings(data)
        self.option_repository.update_option(SETTINGS_OPTION_NAME, sanitized)

        logger.info(
            "reply_settings_saved",
            subject_empty=not sanitized["subject"],
            message_empty=not sanitized["message"],
        )

        return sanitized


reply_settings_service = ReplySettingsService()
