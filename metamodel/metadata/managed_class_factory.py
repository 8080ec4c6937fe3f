from .managed_types import Entity, ManagedType, ValueObject, ValueType
from ..configuration.mapping_style import MappingStyle
from ..definitions.definition import Definition, EntityDefinition, ValueObjectDefinition, ValueTypeDeclaration
from ..properties.property import Property
from ..properties.property_scanner import PropertyScanner, scanner_for
from ..utilities.logger import get_logger
from ..utilities.setup_error import IdPropertyNotFound, NoIdPropertyFound


ID_CONVENTION_NAMES: tuple[str, ...] = ("id", "_id")
""" Consulted in order when no property of an Entity carries the Id marker. """

class ManagedClassFactory:
	""" Resolves Definitions into ManagedTypes. Pure: it never touches the type registry. """

	def __init__(self, mapping_style: MappingStyle, property_scanner: PropertyScanner | None = None) -> None:
		self.mapping_style = MappingStyle.parse(mapping_style)
		self.property_scanner = property_scanner if property_scanner is not None else scanner_for(self.mapping_style)

	def create(self, definition: Definition) -> ManagedType:
		match definition:
			case EntityDefinition(cls=cls, id_property_name=id_property_name):
				return self.create_entity(cls, id_property_name)
			case ValueObjectDefinition(cls=cls):
				return self.create_value_object(cls)
			case ValueTypeDeclaration(cls=cls, codec=codec):
				return ValueType(cls=cls, codec=codec)
			case _:
				raise TypeError(f"Unsupported definition {definition!r}.")

	def create_entity(self, cls: type, id_property_name: str | None = None) -> Entity:
		properties = self.property_scanner.scan(cls)
		
		if id_property_name is not None:
			id_property = self._find_named_id_property(cls, properties, id_property_name)
		else:
			id_property = self._find_id_property(cls, properties)

		get_logger().debug(f"Resolved entity '{cls.__qualname__}' with id-property '{id_property.name}' ({self.mapping_style} mapping).")
		return Entity(
			cls=cls,
			id_property=id_property,
			properties=tuple(property_ for property_ in properties if property_.name != id_property.name)
		)

	def create_value_object(self, cls: type) -> ValueObject:
		properties = self.property_scanner.scan(cls)
		get_logger().debug(f"Resolved value object '{cls.__qualname__}' with {len(properties)} properties ({self.mapping_style} mapping).")
		return ValueObject(cls=cls, properties=properties)

	def _find_named_id_property(self, cls: type, properties: tuple[Property, ...], id_property_name: str) -> Property:
		for property_ in properties:
			if property_.name == id_property_name:
				return property_
		raise IdPropertyNotFound(cls, id_property_name, [property_.name for property_ in properties])

	def _find_id_property(self, cls: type, properties: tuple[Property, ...]) -> Property:
		""" The Id marker wins. Only when nothing is marked, fall back to the naming convention. Ambiguity is an error, never a silent pick. """
		candidates = [property_ for property_ in properties if property_.is_id_marked]
		
		if not candidates:
			by_name = {property_.name: property_ for property_ in properties}
			candidates = [by_name[name] for name in ID_CONVENTION_NAMES if name in by_name]

		if len(candidates) != 1:
			raise NoIdPropertyFound(cls, [property_.name for property_ in candidates])
		return candidates[0]
