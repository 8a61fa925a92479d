"""Exception handling utilities for the comment reply notification service."""

from core.exceptions.comment_exceptions import CommentNotFoundError
from core.exceptions.handlers import custom_exception_handler

__all__ = [
    "CommentNotFoundError",
    "custom_exception_handler",
]
