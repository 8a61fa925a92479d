"""Comment lifecycle signals.

``comment_inserted`` is sent with ``comment_id`` and ``comment`` once a new
comment row exists. ``comment_status_changed`` is sent with ``comment_id`` and
``comment_status`` after a comment has been moderated.
"""

from django.dispatch import Signal

comment_inserted = Signal()
comment_status_changed = Signal()
