"""Reply notification settings schemas."""

from core.schemas.reply_settings.placeholder_info import PlaceholderInfo
from core.schemas.reply_settings.placeholder_list_response import (
    PlaceholderListResponse,
)
from core.schemas.reply_settings.reply_settings_request import ReplySettingsRequest
from core.schemas.reply_settings.reply_settings_response import (
    ReplySettingsResponse,
)

__all__ = [
    "PlaceholderInfo",
    "PlaceholderListResponse",
    "ReplySettingsRequest",
    "ReplySettingsResponse",
]
