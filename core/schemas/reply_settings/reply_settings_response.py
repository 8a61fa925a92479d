"""Response schema for the reply notification templates."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class ReplySettingsResponse(BaseSchemaModel):
    """Current subject and message templates, with defaults applied."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "subject": "There's a reply to your comment on My Site",
                "message": (
                    "And here's the new reply from %reply_comment_author%: "
                    "<blockquote>%reply_comment_content%</blockquote>"
                ),
            }
        }
    )

    subject: str = Field(..., description="Email subject template")
    message: str = Field(..., description="Email message template")
