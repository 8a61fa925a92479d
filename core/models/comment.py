"""Comment model."""

from typing import ClassVar

from django.db import models

from core.enums import CommentApproval, CommentStatusAction
from core.events import comment_status_changed

# Status strings accepted by set_status and the approval value each one stores.
STATUS_TO_APPROVAL = {
    CommentStatusAction.APPROVE.value: CommentApproval.APPROVED.value,
    CommentApproval.APPROVED.value: CommentApproval.APPROVED.value,
    CommentStatusAction.HOLD.value: CommentApproval.PENDING.value,
    CommentApproval.PENDING.value: CommentApproval.PENDING.value,
    CommentStatusAction.SPAM.value: CommentApproval.SPAM.value,
    CommentStatusAction.TRASH.value: CommentApproval.TRASH.value,
}


class Comment(models.Model):
    """Comment model matching the host site's comments table.

    This model is unmanaged as the database schema is owned by the host site.
    A ``parent_id`` of NULL or 0 marks a top-level comment. The parent
    relation has no database constraint because the host may delete a parent
    while its replies remain.
    """

    post = models.ForeignKey(
        "core.Post",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name="comments",
        db_column="post_id",
    )
    parent = models.ForeignKey(
        "self",
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        null=True,
        blank=True,
        related_name="replies",
        db_column="parent_id",
    )
    author_name = models.CharField(max_length=255, default="", blank=True)
    author_email = models.CharField(max_length=100, default="", blank=True)
    content = models.TextField(default="", blank=True)
    approved = models.CharField(
        max_length=20,
        default=CommentApproval.PENDING.value,
    )
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "comments"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["created_at"]

    def __str__(self) -> str:
        """Return string representation of comment."""
        return f"Comment {self.pk} by {self.author_name}"

    def __repr__(self) -> str:
        """Return detailed representation of comment."""
        return (
            f"<Comment(id={self.pk}, post_id={self.post_id}, "
            f"parent_id={self.parent_id}, approved='{self.approved}')>"
        )

    @property
    def is_approved(self) -> bool:
        """Whether the comment is visible on the site."""
        return self.approved == CommentApproval.APPROVED.value

    def set_status(self, comment_status: str) -> None:
        """Moderate the comment and announce the change.

        The status string is broadcast exactly as given, so receivers see
        ``"1"`` and ``"approve"`` as different values.

        Args:
            comment_status: One of approve, hold, spam, trash, "1" or "0".

        Raises:
            ValueError: If the status string is not recognised.
        """
        try:
            approval = STATUS_TO_APPROVAL[comment_status]
        except KeyError:
            error_msg = f"Unknown comment status: {comment_status}"
            raise ValueError(error_msg) from None

        self.approved = approval
        self.save(update_fields=["approved"])

        comment_status_changed.send(
            sender=self.__class__,
            comment_id=self.pk,
            comment_status=comment_status,
        )
