"""Request schema for updating the reply notification templates."""

from pydantic import Field

from core.schemas.base_schema_model import BaseSchemaModel


class ReplySettingsRequest(BaseSchemaModel):
    """Request schema for saving the reply notification templates.

    Omitted fields are saved as empty strings, which disables notifications
    until a template is provided again.
    """

    subject: str | None = Field(
        None,
        max_length=998,
        description="Email subject template; HTML is stripped",
    )
    message: str | None = Field(
        None,
        description="Email message template; limited HTML is allowed",
    )
