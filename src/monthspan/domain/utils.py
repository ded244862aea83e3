"""Domain layer utilities."""

from .errors import NullArgumentError


def require(value: object, name: str) -> None:
    """Fail fast when a required argument is missing.

    Args:
        value: The argument value.
        name: The argument name, used in the error message.

    Raises:
        NullArgumentError: If ``value`` is None.
    """
    if value is None:
        raise NullArgumentError(name)
