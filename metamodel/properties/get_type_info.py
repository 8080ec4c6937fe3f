from collections.abc import Mapping
from types import UnionType
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin

from .type_info import TypeInfo


def get_type_info(type_: Any) -> TypeInfo:
    """ Extracts type and subtype (if present) for a **single** (non-Union) type. """
    origin = get_origin(type_)

    if origin is Annotated:
        # From the origin, I want to extract the actual type, not the Annotated type. 
        # In other words, if the annotation was Annotated[list, SomeAnnotation], I want to return list
        base_type = get_args(type_)[0]
        return get_type_info(base_type)
    elif origin in {Union, UnionType}:
        raise ValueError("This function should only be used for single types.")
    elif origin is None:
        return TypeInfo(
            type_=type_,
            sub_type=None
        )
    elif origin is ClassVar:
        base_type = get_args(type_)[0]
        return get_type_info(base_type)
    elif origin is tuple:
        # tuple[int, ...] is a homogeneous sequence, fixed-size tuples have no single element type
        args = get_args(type_)
        sub_type = args[0] if len(args) == 2 and args[1] is Ellipsis else None
        return TypeInfo(
            type_=tuple,
            sub_type=sub_type
        )
    else:
        # Handle generic types. Single parameter generics (list, set, frozenset, custom generics) keep their parameter
        # as the sub_type. Mappings store the value type, since keys are always scalars.
        args = get_args(type_)
        if len(args) == 1:
            sub_type = args[0]
        elif len(args) == 2 and isinstance(origin, type) and issubclass(origin, Mapping):
            sub_type = args[1]
        else:
            sub_type = None
        return TypeInfo(
            type_=origin,
            sub_type=sub_type
        )


def get_type_info_list(type_annotation: Any) -> list[TypeInfo]:
    """ Take in a type_annotation (or type) and returns a list of the TypeInfos contained within it.
    
    For Unioned types, returns a multiple TypeInfos. For non-Unioned types, returns a single TypeInfo.
    """
    origin = get_origin(type_annotation)
    
    if origin is Annotated:
        base_type = get_args(type_annotation)[0]
        return get_type_info_list(base_type)

    # For union types, return TypeInfo for each unioned type
    elif origin in {Union, UnionType}:
        return [get_type_info(unioned_type) for unioned_type in get_args(type_annotation)]
    
    # For single types, just return the TypeInfo for that
    else:
        return [get_type_info(type_annotation)]


def get_annotation_markers(type_annotation: Any) -> tuple[Any, ...]:
    """ Returns the metadata attached with Annotated[T, *metadata], or an empty tuple. Nested Annotated types are flattened by typing. """
    if get_origin(type_annotation) is Annotated:
        return tuple(type_annotation.__metadata__)
    return ()
