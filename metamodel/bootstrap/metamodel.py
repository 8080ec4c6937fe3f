from ..configuration.core_configuration import FrozenCoreConfiguration
from ..configuration.mapping_style import MappingStyle
from ..metadata.managed_types import ManagedType
from ..registration.type_registry import TypeRegistry
from ..serialization.converter import Converter


class Metamodel:
	""" The finished, read-only system handed out by MetamodelBuilder.build().
	Exposes the sealed type registry and the frozen converter to the diff engine and any other caller. """

	def __init__(self, type_registry: TypeRegistry, converter: Converter, configuration: FrozenCoreConfiguration) -> None:
		self._type_registry = type_registry
		self._converter = converter
		self._configuration = configuration

	def __repr__(self) -> str:
		return f"Metamodel({len(self._type_registry)} types, mapping_style={self.mapping_style})"

	@property
	def type_registry(self) -> TypeRegistry:
		return self._type_registry

	@property
	def converter(self) -> Converter:
		return self._converter

	@property
	def configuration(self) -> FrozenCoreConfiguration:
		return self._configuration

	@property
	def mapping_style(self) -> MappingStyle:
		return self._configuration.mapping_style

	def lookup(self, cls: type) -> ManagedType | None:
		""" Returns the published metadata of cls, or None when cls was never declared. """
		return self._type_registry.lookup(cls)

	def get(self, cls: type) -> ManagedType:
		return self._type_registry.get(cls)
