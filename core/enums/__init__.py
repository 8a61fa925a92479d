"""Enumerations for the core app."""

from core.enums.comment_status import CommentApproval, CommentStatusAction

__all__ = ["CommentApproval", "CommentStatusAction"]
