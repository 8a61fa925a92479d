"""Comment moderation enumerations.

The host stores a comment's approval state as a short string and reports
moderation changes with a different vocabulary, so both are modelled here.
"""

from enum import Enum


class CommentApproval(str, Enum):
    """Values stored in the ``approved`` column of a comment."""

    APPROVED = "1"
    PENDING = "0"
    SPAM = "spam"
    TRASH = "trash"


class CommentStatusAction(str, Enum):
    """Status strings carried by comment status change events."""

    APPROVE = "approve"
    HOLD = "hold"
    SPAM = "spam"
    TRASH = "trash"
