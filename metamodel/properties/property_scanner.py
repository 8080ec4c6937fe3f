"""
Property discovery strategies.

A PropertyScanner turns a class into an ordered tuple of Properties. The order is the
declaration order as seen by introspection, walking the MRO from the base classes down,
so that managed class metadata is deterministic. Which scanner is used is decided by the
MappingStyle.
"""

import dataclasses
import functools
from typing import Any, ClassVar, Protocol, get_origin, get_type_hints

from .get_type_expectation_from_type_annotation import get_type_expectation_from_type_annotation
from .get_type_info import get_annotation_markers
from .markers import Id, Transient
from .property import MemberKind, Property
from ..configuration.mapping_style import MappingStyle
from ..utilities.setup_error import PropertyResolutionError


def is_dunder(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


class PropertyScanner(Protocol):
    member_kind: MemberKind

    def scan(self, cls: type) -> tuple[Property, ...]:
        """ Returns the properties of cls in declaration order. """
        ...


def _build_property(cls: type, name: str, annotation: Any, member_kind: MemberKind) -> Property:
    """ Converts one annotated member into a Property, wrapping annotation errors into a PropertyResolutionError. """
    try:
        type_expectation = get_type_expectation_from_type_annotation(annotation)
    except ValueError as e:
        raise PropertyResolutionError(f"Unable to resolve property '{name}' of class '{cls.__qualname__}': {e}", cls) from e

    return Property(
        name=name,
        declaring_cls=cls,
        type_expectation=type_expectation,
        member_kind=member_kind,
        is_id_marked=Id in get_annotation_markers(annotation)
    )


class FieldPropertyScanner:
    """ Discovers annotated instance attributes. Static (ClassVar), InitVar, KW_ONLY and Transient attributes are skipped. """
    member_kind = MemberKind.FIELD

    def scan(self, cls: type) -> tuple[Property, ...]:
        try:
            # get_type_hints walks the MRO in reverse, so base class fields come first
            type_hints = get_type_hints(cls, include_extras=True)
        except Exception as e:
            raise PropertyResolutionError(f"Unable to resolve the type annotations of class '{cls.__qualname__}': {e}", cls) from e

        properties = []
        for field_name, field_annotation in type_hints.items():
            if is_dunder(field_name):
                continue
            if get_origin(field_annotation) is ClassVar or isinstance(field_annotation, dataclasses.InitVar):
                continue
            if field_annotation is dataclasses.KW_ONLY:
                continue
            if Transient in get_annotation_markers(field_annotation):
                continue
            properties.append(_build_property(cls, field_name, field_annotation, self.member_kind))
        return tuple(properties)


class AccessorPropertyScanner:
    """ Discovers @property and functools.cached_property members, typed by their return annotation. """
    member_kind = MemberKind.ACCESSOR

    def scan(self, cls: type) -> tuple[Property, ...]:
        # Collect accessors base class first. An override keeps the position of the original declaration.
        accessors: dict[str, Any] = {}
        for klass in reversed(cls.__mro__):
            if klass is object:
                continue
            for name, attr in vars(klass).items():
                if is_dunder(name):
                    continue
                if isinstance(attr, property):
                    accessors[name] = attr.fget
                elif isinstance(attr, functools.cached_property):
                    accessors[name] = attr.func
                elif name in accessors:
                    # A subclass replaced the accessor with a plain attribute
                    del accessors[name]

        properties = []
        for name, getter in accessors.items():
            if getter is None:
                continue
            try:
                return_annotation = get_type_hints(getter, include_extras=True).get("return", Any)
            except Exception as e:
                raise PropertyResolutionError(f"Unable to resolve the return annotation of accessor '{name}' of class '{cls.__qualname__}': {e}", cls) from e
            if Transient in get_annotation_markers(return_annotation):
                continue
            properties.append(_build_property(cls, name, return_annotation, self.member_kind))
        return tuple(properties)


_SCANNERS: dict[MappingStyle, PropertyScanner] = {
    MappingStyle.FIELD: FieldPropertyScanner(),
    MappingStyle.ACCESSOR: AccessorPropertyScanner(),
}

def scanner_for(mapping_style: MappingStyle) -> PropertyScanner:
    """ Returns the built-in scanner for the mapping style. """
    return _SCANNERS[MappingStyle.parse(mapping_style)]
