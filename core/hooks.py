"""Extension point for outgoing reply notification headers.

A header filter is a callable ``(headers, reply_comment, parent_comment)``
returning the header list to send. Filters run in order: those listed by
dotted path in the COMMENT_REPLY_HEADER_FILTERS setting first, then those
registered at runtime. A filter returning None leaves the headers unchanged.
"""

from collections.abc import Callable

from django.conf import settings
from django.utils.module_loading import import_string

from core.models import Comment

HeaderFilter = Callable[[list[str], Comment, Comment], list[str] | None]

_registered_filters: list[HeaderFilter] = []


def register_header_filter(header_filter: HeaderFilter) -> HeaderFilter:
    """Add a header filter. Usable as a decorator."""
    if header_filter not in _registered_filters:
        _registered_filters.append(header_filter)
    return header_filter


def unregister_header_filter(header_filter: HeaderFilter) -> None:
    """Remove a previously registered header filter."""
    if header_filter in _registered_filters:
        _registered_filters.remove(header_filter)


def get_header_filters() -> list[HeaderFilter]:
    """Return the configured filters followed by the registered ones."""
    configured = [
        import_string(path)
        for path in getattr(settings, "COMMENT_REPLY_HEADER_FILTERS", [])
    ]
    return [*configured, *_registered_filters]


def apply_header_filters(
    headers: list[str], reply_comment: Comment, parent_comment: Comment
) -> list[str]:
    """Run the header filter chain.

    Args:
        headers: Headers built by the notifier.
        reply_comment: The new reply.
        parent_comment: The comment being replied to.

    Returns:
        The final header list.
    """
    for header_filter in get_header_filters():
        result = header_filter(list(headers), reply_comment, parent_comment)
        if result is not None:
            headers = list(result)
    return headers
