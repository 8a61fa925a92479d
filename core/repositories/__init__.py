"""Repositories for host-owned data."""

from core.repositories.comment_repository import CommentRepository
from core.repositories.option_repository import OptionRepository

__all__ = ["CommentRepository", "OptionRepository"]
