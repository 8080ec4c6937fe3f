from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
	from ..serialization.codec import Codec


@dataclass(frozen=True)
class EntityDefinition:
	""" Declares cls as an Entity. When id_property_name is None, the id-property is found through the Id marker or naming convention. """
	cls: type
	id_property_name: str | None = None


@dataclass(frozen=True)
class ValueObjectDefinition:
	cls: type


@dataclass(frozen=True)
class ValueTypeDeclaration:
	""" Declares cls as a scalar Value, optionally with a bound codec. Values never acquire properties. """
	cls: type
	codec: 'Codec | None' = None


Definition = EntityDefinition | ValueObjectDefinition | ValueTypeDeclaration
