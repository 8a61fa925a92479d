"""Shared pydantic configuration for the settings API schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseSchemaModel(BaseModel):
    """Base model for request and response bodies of the settings API.

    Fields accept camelCase or snake_case keys, unknown keys sent by the
    admin form are dropped, and surrounding whitespace is trimmed from
    template strings before they reach the sanitizers.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        str_strip_whitespace=True,
        frozen=True,
    )
