"""Django signals for notification triggers."""

from core.signals.comment_signals import (
    announce_comment_insert,
    on_comment_inserted,
    on_comment_status_changed,
)

__all__ = [
    "announce_comment_insert",
    "on_comment_inserted",
    "on_comment_status_changed",
]
