"""Reply notification service.

Renders the configured subject and message templates for a reply and its
parent comment and hands the result to the email service. A dispatch either
sends exactly one email or returns False; it never raises for a missing
comment, an empty template, a failing header filter or an SMTP failure.
"""

import smtplib

from django.utils.html import escape

import structlog

from core import constants
from core.constants import placeholders
from core.exceptions import CommentNotFoundError
from core.hooks import apply_header_filters
from core.models import Comment
from core.repositories import CommentRepository
from core.services.email_service import EmailService
from core.services.permalinks import escape_url, get_comment_link, get_permalink
from core.services.settings_service import ReplySettingsService

logger = structlog.get_logger(__name__)

# A comment may be passed by primary key or as an already loaded instance.
CommentRef = int | Comment


def replace_placeholders(template: str, replacements: dict[str, str]) -> str:
    """Replace every occurrence of each token in a template.

    Tokens are replaced one after another in the order of ``replacements``,
    each over the whole string. A value inserted for an earlier token is
    therefore scanned for the tokens that follow it. Text that is not a key
    of ``replacements`` is left verbatim.

    Args:
        template: Subject or message template.
        replacements: Ordered token to value mapping.

    Returns:
        The compiled string.
    """
    for token, value in replacements.items():
        template = template.replace(token, value)
    return template


class ReplyNotificationService:
    """Service for emailing a comment author when their comment gets a reply."""

    def __init__(
        self,
        comment_repository: CommentRepository | None = None,
        settings_service: ReplySettingsService | None = None,
        email_service: EmailService | None = None,
    ) -> None:
        """Initialize reply notification service.

        Args:
            comment_repository: Comment and post lookups.
            settings_service: Template settings.
            email_service: Mail sink.
        """
        self.comment_repository = comment_repository or CommentRepository()
        self.settings_service = settings_service or ReplySettingsService()
        self.email_service = email_service or EmailService()

    def dispatch(
        self,
        reply_comment: CommentRef | None,
        parent_comment: CommentRef | None,
    ) -> bool:
        """Send the email notification for a reply.

        Args:
            reply_comment: The new reply, as an ID or instance.
            parent_comment: The comment replied to, as an ID or instance.
                Its author receives the email.

        Returns:
            True if the email was handed to the SMTP server, False if either
            comment is missing, a template is empty or delivery failed.
        """
        try:
            reply = self._resolve_comment(reply_comment)
            parent = self._resolve_comment(parent_comment)
        except CommentNotFoundError as e:
            logger.warning(
                "reply_notification_comment_not_found",
                comment_id=str(e.comment_id),
            )
            return False

        recipient = parent.author_email
        subject_template = self.settings_service.get_option("subject")
        message_template = self.settings_service.get_option("message")

        if not subject_template or not message_template:
            return False

        replacements = self.build_replacements(reply, parent)
        compiled_subject = replace_placeholders(subject_template, replacements)
        compiled_message = replace_placeholders(message_template, replacements)

        try:
            headers = apply_header_filters(
                [constants.HTML_CONTENT_TYPE_HEADER], reply, parent
            )
        except Exception as e:
            logger.error(
                "reply_notification_header_filter_failed",
                reply_comment_id=reply.pk,
                parent_comment_id=parent.pk,
                error=str(e),
            )
            return False

        try:
            sent = self.email_service.send_email(
                to_email=recipient,
                subject=compiled_subject,
                html_content=compiled_message,
                headers=headers,
            )
        except (ValueError, smtplib.SMTPException, OSError) as e:
            logger.error(
                "reply_notification_failed",
                reply_comment_id=reply.pk,
                parent_comment_id=parent.pk,
                recipient_email=recipient,
                error=str(e),
            )
            return False

        logger.info(
            "reply_notification_sent",
            reply_comment_id=reply.pk,
            parent_comment_id=parent.pk,
            recipient_email=recipient,
            sent=sent,
        )

        return bool(sent)

    def build_replacements(self, reply: Comment, parent: Comment) -> dict[str, str]:
        """Compute the value of every placeholder for a reply.

        Post values come from the parent comment's post. Comment bodies are
        inserted raw; every other value is escaped for HTML.

        Args:
            reply: The new reply.
            parent: The comment replied to.

        Returns:
            Token to value mapping.
        """
        post = self.comment_repository.get_post(parent.post_id)

        return {
            placeholders.POST_TITLE: escape(post.title) if post else "",
            placeholders.POST_URL: escape_url(get_permalink(post)),
            placeholders.ORIGINAL_COMMENT_URL: escape_url(get_comment_link(parent)),
            placeholders.REPLY_COMMENT_URL: escape_url(get_comment_link(reply)),
            placeholders.ORIGINAL_COMMENT_CONTENT: parent.content,
            placeholders.REPLY_COMMENT_CONTENT: reply.content,
            placeholders.ORIGINAL_COMMENT_AUTHOR: escape(parent.author_name),
            placeholders.REPLY_COMMENT_AUTHOR: escape(reply.author_name),
        }

    def _resolve_comment(self, comment: CommentRef | None) -> Comment:
        """Normalize a comment reference to a Comment instance.

        Raises:
            CommentNotFoundError: If the reference does not resolve.
        """
        if isinstance(comment, Comment):
            return comment

        # bool is an int subclass and int() truncates floats
        if isinstance(comment, bool | float):
            raise CommentNotFoundError(comment)

        try:
            comment_id = int(comment)
        except (TypeError, ValueError):
            raise CommentNotFoundError(comment) from None

        resolved = self.comment_repository.get_comment(comment_id)
        if resolved is None:
            raise CommentNotFoundError(comment_id)
        return resolved


reply_notification_service = ReplyNotificationService()
