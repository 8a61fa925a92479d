"""Per-thread request ID used to correlate log events."""

import threading

_local = threading.local()


def set_request_id(request_id: str) -> None:
    """Bind a request ID to the current thread."""
    _local.request_id = request_id


def get_request_id() -> str | None:
    """Return the request ID bound to the current thread, if any."""
    return getattr(_local, "request_id", None)


def clear_request_id() -> None:
    """Unbind the request ID once the request has been handled.

    Worker threads are reused, so a stale ID would otherwise leak into the
    next request's logs.
    """
    if hasattr(_local, "request_id"):
        del _local.request_id
