"""Constants package for core application."""

from core.constants.http import REQUEST_ID_HEADER

# Export placeholder registry
from core.constants.placeholders import PLACEHOLDER_REGISTRY, PLACEHOLDER_TOKENS

# Option name under which the reply notification templates are stored
SETTINGS_OPTION_NAME = "ng_crn_settings"

# Option holding the site name
SITE_NAME_OPTION = "blogname"

# Content type sent with every reply notification
HTML_CONTENT_TYPE_HEADER = "Content-Type: text/html; charset=UTF-8"

__all__ = [
    "HTML_CONTENT_TYPE_HEADER",
    "PLACEHOLDER_REGISTRY",
    "PLACEHOLDER_TOKENS",
    "REQUEST_ID_HEADER",
    "SETTINGS_OPTION_NAME",
    "SITE_NAME_OPTION",
]
