from collections.abc import Container


def type_name(cls: type) -> str:
    """ Module-qualified name of a class. Used as the registry name key and as the type tag of type-safe values. """
    return f"{cls.__module__}.{cls.__qualname__}"

def unique_type_name(cls: type, taken: Container[str]) -> str:
    """ type_name(cls), suffixed with #2, #3, ... while the name is already taken.
    Distinct classes can share a qualified name (classes built in a factory function, by make_dataclass or type()). """
    name = type_name(cls)
    candidate = name
    suffix = 2
    while candidate in taken:
        candidate = f"{name}#{suffix}"
        suffix += 1
    return candidate
