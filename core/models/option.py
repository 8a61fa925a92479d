"""Option model."""

from django.db import models


class Option(models.Model):
    """Site option matching the host site's options table.

    A plain name/value store. Values are JSON so that structured settings
    such as the reply notification templates are kept in a single row.
    """

    name = models.CharField(max_length=191, unique=True)
    value = models.JSONField(null=True, blank=True)

    class Meta:
        """Django model metadata."""

        db_table = "options"
        managed = False  # Schema is managed externally

    def __str__(self) -> str:
        """Return string representation of option."""
        return self.name
