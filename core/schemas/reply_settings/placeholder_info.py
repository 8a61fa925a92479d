"""Schema for placeholder information."""

from pydantic import ConfigDict, Field

from core.schemas.base_schema_model import BaseSchemaModel


class PlaceholderInfo(BaseSchemaModel):
    """Schema for a template placeholder token."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "token": "%post_title%",
                "description": "Title of the blog post the comment was made on.",
            }
        }
    )

    token: str = Field(..., description="Literal token to place in a template")
    description: str = Field(..., description="Value the token is replaced with")
