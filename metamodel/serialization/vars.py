from typing import Any


__type_id__ = "__type_id__"
__value__ = "__value__"

def get_type_id(bson: Any) -> str | None:
    """ Get the type_id from a type-safe value, if present. """
    if not isinstance(bson, dict):
        return None
    
    type_id = bson.get(__type_id__, None)
    if not isinstance(type_id, str) or __value__ not in bson:
        return None
    
    return type_id
