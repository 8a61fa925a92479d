"""Post model."""

from typing import ClassVar

from django.db import models


class Post(models.Model):
    """Post model matching the host site's posts table.

    This model is unmanaged as the database schema is owned by the host site.
    It provides read-only access to the title and slug used in notifications.
    """

    title = models.CharField(max_length=255, default="", blank=True)
    slug = models.SlugField(max_length=200)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        """Django model metadata."""

        db_table = "posts"
        managed = False  # Schema is managed externally
        ordering: ClassVar[list[str]] = ["-created_at"]

    def __str__(self) -> str:
        """Return string representation of post."""
        return self.title

    def __repr__(self) -> str:
        """Return detailed representation of post."""
        return f"<Post(id={self.pk}, slug='{self.slug}')>"
