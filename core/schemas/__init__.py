"""Pydantic schemas for the core app."""

from core.schemas.base_schema_model import BaseSchemaModel

__all__ = ["BaseSchemaModel"]
