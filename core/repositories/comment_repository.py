"""Repository for comment and post lookups."""

from core.models import Comment, Post


class CommentRepository:
    """Repository for encapsulating comment database queries.

    Lookups return None for missing rows instead of raising, since a comment
    or post may be deleted by the host at any time.
    """

    @staticmethod
    def get_comment(comment_id: int | None) -> Comment | None:
        """Look up a comment by its ID.

        Args:
            comment_id: Primary key of the comment

        Returns:
            The Comment, or None if the ID is empty or no row exists

        Example:
            >>> comment = CommentRepository.get_comment(10)
            >>> if comment is not None:
            ...     print(comment.author_email)
        """
        if not comment_id:
            return None
        return Comment.objects.filter(pk=comment_id).first()

    @staticmethod
    def get_post(post_id: int | None) -> Post | None:
        """Look up a post by its ID.

        Args:
            post_id: Primary key of the post

        Returns:
            The Post, or None if the ID is empty or no row exists
        """
        if not post_id:
            return None
        return Post.objects.filter(pk=post_id).first()
