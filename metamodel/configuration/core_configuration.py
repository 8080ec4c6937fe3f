from dataclasses import dataclass

from .mapping_style import MappingStyle


@dataclass
class CoreConfiguration:
	""" Settings gathered during the configuration window. The builder freezes a copy into the finished Metamodel. """
	mapping_style: MappingStyle = MappingStyle.FIELD
	type_safe_values: bool = False

	def with_mapping_style(self, mapping_style: MappingStyle) -> 'CoreConfiguration':
		self.mapping_style = mapping_style
		return self

	def freeze(self) -> 'FrozenCoreConfiguration':
		return FrozenCoreConfiguration(mapping_style=self.mapping_style, type_safe_values=self.type_safe_values)


@dataclass(frozen=True)
class FrozenCoreConfiguration:
	""" Read-only copy of CoreConfiguration exposed after build(). """
	mapping_style: MappingStyle
	type_safe_values: bool
