"""Custom exceptions for comment resolution."""


class CommentNotFoundError(Exception):
    """Comment reference does not resolve to a row in the comments table."""

    def __init__(self, comment_id):
        """Initialize comment not found error.

        Args:
            comment_id: ID (or unresolvable reference) of the missing comment
        """
        self.comment_id = comment_id
        super().__init__(f"Comment with ID {comment_id} not found")
