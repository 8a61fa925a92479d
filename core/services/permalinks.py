"""Public URLs for posts and comments as they appear on the host site."""

from urllib.parse import urlsplit

from django.conf import settings
from django.utils.encoding import iri_to_uri
from django.utils.html import escape

from core.models import Comment, Post
from core.repositories import CommentRepository

ALLOWED_URL_SCHEMES = ("http", "https", "mailto")


def get_permalink(post: Post | None) -> str:
    """Build the absolute URL of a post.

    The path comes from the PERMALINK_STRUCTURE setting, which may reference
    ``{id}`` and ``{slug}``.

    Args:
        post: The post, or None if it no longer exists.

    Returns:
        The absolute URL, or an empty string for a missing post.
    """
    if post is None:
        return ""

    path = settings.PERMALINK_STRUCTURE.format(id=post.pk, slug=post.slug)
    return f"{settings.SITE_URL.rstrip('/')}/{path.lstrip('/')}"


def get_comment_link(comment: Comment) -> str:
    """Build the deep link to a comment on its post's page.

    Args:
        comment: The comment to link to.

    Returns:
        The post permalink with a ``#comment-<id>`` fragment, or an empty
        string if the post no longer exists.
    """
    permalink = get_permalink(CommentRepository.get_post(comment.post_id))
    if not permalink:
        return ""
    return f"{permalink}#comment-{comment.pk}"


def escape_url(url: str | None) -> str:
    """Make a URL safe for use in HTML.

    URLs with a scheme outside ALLOWED_URL_SCHEMES are rejected. Relative URLs
    are kept.

    Args:
        url: URL to clean.

    Returns:
        The IRI-encoded, HTML-escaped URL, or an empty string if rejected.
    """
    if not url:
        return ""

    url = url.strip().replace(" ", "%20")

    try:
        scheme = urlsplit(url).scheme.lower()
    except ValueError:
        return ""

    if scheme and scheme not in ALLOWED_URL_SCHEMES:
        return ""

    return escape(iri_to_uri(url))
