from collections.abc import Collection, Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from .type_expectation import TypeExpectation


class MemberKind(StrEnum):
    FIELD = "field"
    ACCESSOR = "accessor"


class PropertyShape(StrEnum):
    """ How a property maps onto the diff model: a single value, an element collection or a key/value map. """
    SCALAR = "scalar"
    COLLECTION = "collection"
    MAP = "map"


@dataclass(frozen=True)
class Property:
    """ A resolved property of a managed class. """
    name: str
    declaring_cls: type
    type_expectation: TypeExpectation
    member_kind: MemberKind
    is_id_marked: bool = False

    def __str__(self) -> str:
        return f"{self.declaring_cls.__qualname__}.{self.name}: {self.type_expectation}"

    @property
    def type_(self) -> Any:
        return self.type_expectation.type_info.type_

    @property
    def shape(self) -> PropertyShape:
        type_ = self.type_
        if type_ is Any or not isinstance(type_, type):
            return PropertyShape.SCALAR
        if issubclass(type_, Mapping):
            return PropertyShape.MAP
        # Strings and bytes are containers in Python but values in the metamodel
        if issubclass(type_, (str, bytes, bytearray)):
            return PropertyShape.SCALAR
        if issubclass(type_, Collection):
            return PropertyShape.COLLECTION
        return PropertyShape.SCALAR

    def get(self, instance: Any) -> Any:
        """ Reads the property value from an instance of the managed class. """
        return getattr(instance, self.name)
