"""Schema for placeholder list response."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel
from core.schemas.reply_settings.placeholder_info import PlaceholderInfo


class PlaceholderListResponse(BaseSchemaModel):
    """Schema for placeholder list response."""

    placeholders: list[PlaceholderInfo] = Field(
        ..., description="Placeholders available in subject and message"
    )
