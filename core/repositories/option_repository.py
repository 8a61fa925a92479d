"""Repository for the host site's key/value options."""

from typing import Any

from core.models import Option


class OptionRepository:
    """Repository for reading and writing site options."""

    @staticmethod
    def get_option(name: str, default: Any = None) -> Any:
        """Return the stored value of an option.

        Args:
            name: Option name
            default: Value returned when the option does not exist

        Returns:
            The decoded option value, or ``default``
        """
        option = Option.objects.filter(name=name).first()
        if option is None:
            return default
        return option.value

    @staticmethod
    def update_option(name: str, value: Any) -> Option:
        """Create or replace an option value.

        Args:
            name: Option name
            value: JSON-serializable value to store

        Returns:
            The saved Option
        """
        option, _ = Option.objects.update_or_create(
            name=name,
            defaults={"value": value},
        )
        return option
