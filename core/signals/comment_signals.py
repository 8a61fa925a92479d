"""Django signals for comment reply notifications.

Decides, for each comment lifecycle event, whether the author of the parent
comment should be emailed. Errors never propagate back into the code that
saved or moderated the comment.
"""

from django.db.models.signals import post_save
from django.dispatch import receiver

import structlog

from core.enums import CommentApproval, CommentStatusAction
from core.events import comment_inserted, comment_status_changed
from core.repositories import CommentRepository
from core.services.reply_notification_service import reply_notification_service

logger = structlog.get_logger(__name__)


@receiver(post_save, sender="core.Comment")
def announce_comment_insert(
    sender: type,
    instance,
    created: bool,
    raw: bool = False,
    **_kwargs,
) -> None:
    """Send ``comment_inserted`` when a new comment row is saved.

    Fixture loading (``raw``) and updates of existing rows are ignored.
    """
    if not created or raw:
        return

    comment_inserted.send(sender=sender, comment_id=instance.pk, comment=instance)


@receiver(comment_inserted)
def on_comment_inserted(sender: type, comment_id: int, comment, **_kwargs) -> None:
    """Maybe send a notification when a comment is inserted.

    Args:
        sender: The model class (Comment)
        comment_id: ID of the comment that was just inserted
        comment: The inserted Comment instance
        **kwargs: Additional signal arguments
    """
    try:
        notify_parent_author(comment)
    except Exception as e:
        # Don't let notification failures break comment creation
        logger.error(
            "reply_notification_on_insert_failed",
            comment_id=comment_id,
            error=str(e),
        )


@receiver(comment_status_changed)
def on_comment_status_changed(
    sender: type, comment_id: int, comment_status: str, **_kwargs
) -> None:
    """Maybe send a notification when a comment is approved.

    Only the exact status string ``"approve"`` counts. The comment is then
    handled as if it had just been inserted in the approved state.

    Args:
        sender: The model class (Comment)
        comment_id: ID of the comment that was moderated
        comment_status: New status string as reported by the moderation call
        **kwargs: Additional signal arguments
    """
    if comment_status != CommentStatusAction.APPROVE.value:
        return

    try:
        comment = CommentRepository.get_comment(comment_id)
        if comment is None:
            logger.warning(
                "reply_notification_comment_not_found",
                comment_id=comment_id,
            )
            return

        notify_parent_author(comment)
    except Exception as e:
        # Don't let notification failures break comment moderation
        logger.error(
            "reply_notification_on_status_change_failed",
            comment_id=comment_id,
            error=str(e),
        )


def notify_parent_author(comment) -> bool:
    """Email the parent comment's author if the comment is an approved reply.

    Self-replies, where both comments share an author email, are skipped.
    A deleted parent is passed through unresolved; the notifier then
    returns False without sending.

    Args:
        comment: Comment instance that may be a reply.

    Returns:
        True if a notification was sent.
    """
    # Not approved, or not a reply to a parent comment
    if str(comment.approved) != CommentApproval.APPROVED.value:
        return False
    if (comment.parent_id or 0) < 1:
        return False

    parent = CommentRepository.get_comment(comment.parent_id)

    # If someone is replying to themselves, don't send an email
    if parent is not None and parent.author_email == comment.author_email:
        logger.info(
            "reply_notification_skipped_self_reply",
            comment_id=comment.pk,
            parent_comment_id=parent.pk,
        )
        return False

    return reply_notification_service.dispatch(comment, parent)
