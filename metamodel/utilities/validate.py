from typing import Any

from .setup_error import InvalidArgument


def argument_is_class(cls: Any, argument_name: str = "cls") -> type:
    """ Raises InvalidArgument unless cls is an actual class. Returns the class for convenience. """
    if cls is None:
        raise InvalidArgument(f"Argument '{argument_name}' must not be None.")
    if not isinstance(cls, type):
        raise InvalidArgument(f"Argument '{argument_name}' must be a class, got {type(cls).__name__} '{cls!r}'.")
    return cls

def argument_is_name(name: Any, argument_name: str) -> str:
    """ Raises InvalidArgument unless name is a non-empty string. """
    if not isinstance(name, str) or not name:
        raise InvalidArgument(f"Argument '{argument_name}' must be a non-empty string, got '{name!r}'.")
    return name
