"""Database models for core application."""

from core.models.comment import Comment
from core.models.option import Option
from core.models.post import Post

__all__ = ["Comment", "Option", "Post"]
