from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..properties.property import Property

if TYPE_CHECKING:
    from ..serialization.codec import Codec


@dataclass(frozen=True)
class Entity:
    """ A class with identity. The id_property is not repeated in properties. """
    cls: type
    id_property: Property
    properties: tuple[Property, ...]

    @property
    def all_properties(self) -> tuple[Property, ...]:
        return (self.id_property, *self.properties)

    def get_property(self, name: str) -> Property | None:
        return next((property_ for property_ in self.all_properties if property_.name == name), None)

    def get_id(self, instance: object) -> object:
        """ Returns the identity value of an instance. """
        return self.id_property.get(instance)


@dataclass(frozen=True)
class ValueObject:
    """ A class without identity, compared property by property. """
    cls: type
    properties: tuple[Property, ...]

    @property
    def all_properties(self) -> tuple[Property, ...]:
        return self.properties

    def get_property(self, name: str) -> Property | None:
        return next((property_ for property_ in self.properties if property_.name == name), None)


@dataclass(frozen=True)
class ValueType:
    """ A scalar Value. Compared with ==, never inspected property by property. """
    cls: type
    codec: 'Codec | None' = None


ManagedType = Entity | ValueObject | ValueType
