from dataclasses import dataclass
from typing import Any, Callable

from .boot_state import BootState, is_valid_transition
from .metamodel import Metamodel
from ..configuration.core_configuration import CoreConfiguration
from ..configuration.mapping_style import MappingStyle
from ..definitions.definition import Definition, EntityDefinition, ValueObjectDefinition, ValueTypeDeclaration
from ..definitions.definition_set import DefinitionSet
from ..metadata.managed_class_factory import ManagedClassFactory
from ..metadata.managed_types import ValueType
from ..registration.type_registry import TypeRegistry
from ..serialization.codec import Codec, FunctionCodec
from ..serialization.converter import Converter
from ..serialization.converter_builder import ConverterBuilder
from ..utilities.logger import get_logger
from ..utilities.setup_error import IllegalLifecycleState, InternalInvariantViolation, InvalidArgument
from ..utilities.validate import argument_is_class, argument_is_name


@dataclass
class BootContext:
	""" Everything accumulated during the configuration window. Owned by a single builder and discarded once build() succeeds. """
	configuration: CoreConfiguration
	definitions: DefinitionSet
	converter_builder: ConverterBuilder
	type_registry: TypeRegistry


class MetamodelBuilder:
	""" Creates a Metamodel from your domain model declarations.

	Usage:
		metamodel = (metamodel_builder()
			.declare_entity(Employee, "id")
			.declare_value_object(Address)
			.declare_value_with_codec(MoneyCodec())
			.set_mapping_style(MappingStyle.FIELD)
			.build())

	build() runs three phases, strictly in order:
		1. core components (done on construction)
		2. the converter is frozen from the codecs of the final Value declarations
		3. every definition is resolved into managed class metadata and published into the type registry
	A builder can be built only once. If build() fails, nothing is published and the builder cannot be reused.
	"""

	def __init__(self) -> None:
		get_logger().debug("Starting up metamodel builder...")
		self._state = BootState.CONFIGURING
		self._metamodel: Metamodel | None = None

		# Bootstrap phase 1: core components
		self._context: BootContext | None = self._boot_core()
		self._type_registry = self._context.type_registry

	def __repr__(self) -> str:
		return f"MetamodelBuilder(state={self._state})"

	@property
	def state(self) -> BootState:
		return self._state

	@property
	def type_registry(self) -> TypeRegistry:
		""" The shared registry instance. It stays empty until build() completes. """
		return self._type_registry

	@property
	def definitions(self) -> tuple[Definition, ...]:
		""" Pending definitions. Only available during the configuration window. """
		return tuple(self._configuring_context("read definitions").definitions)

	def definition_for(self, cls: type) -> Definition | None:
		return self._configuring_context("read definitions").definitions.get(cls)

	## Configuration window ##

	def declare_entity(self, cls: type, id_property_name: str | None = None) -> 'MetamodelBuilder':
		""" Declares an Entity. Without id_property_name, the id-property is the one marked with Id (or named by convention). """
		context = self._configuring_context("declare an entity")
		argument_is_class(cls)
		if id_property_name is not None:
			argument_is_name(id_property_name, "id_property_name")
		context.definitions.add(EntityDefinition(cls, id_property_name))
		return self

	def declare_entities(self, *classes: type) -> 'MetamodelBuilder':
		for cls in classes:
			self.declare_entity(cls)
		return self

	def declare_value_object(self, cls: type) -> 'MetamodelBuilder':
		context = self._configuring_context("declare a value object")
		argument_is_class(cls)
		context.definitions.add(ValueObjectDefinition(cls))
		return self

	def declare_value_objects(self, *classes: type) -> 'MetamodelBuilder':
		for cls in classes:
			self.declare_value_object(cls)
		return self

	def declare_value(self, cls: type) -> 'MetamodelBuilder':
		""" Declares a scalar Value type. Values are compared with == and never acquire properties. """
		context = self._configuring_context("declare a value")
		argument_is_class(cls)
		context.definitions.add(ValueTypeDeclaration(cls))
		return self

	def declare_value_with_codec(self, codec: Codec) -> 'MetamodelBuilder':
		""" Declares codec.value_type as a Value and binds the codec in the converter.
		Useful for Values whose default representation isn't appropriate.
		The codec follows the declaration: re-declaring the class afterwards drops it. """
		context = self._configuring_context("declare a value codec")
		if codec is None:
			raise InvalidArgument("Codec must not be None.")
		value_type = argument_is_class(getattr(codec, "value_type", None), "codec.value_type")
		context.definitions.add(ValueTypeDeclaration(value_type, codec))
		return self

	def declare_value_with_functions(self, cls: type, to_bson: Callable[[Any], Any], from_bson: Callable[[Any], Any]) -> 'MetamodelBuilder':
		""" Shortcut for declare_value_with_codec() when you already have a pair of conversion functions. """
		argument_is_class(cls)
		if not callable(to_bson) or not callable(from_bson):
			raise InvalidArgument(f"to_bson and from_bson for '{cls.__qualname__}' must be callables.")
		return self.declare_value_with_codec(FunctionCodec(cls, to_bson, from_bson))

	def type_safe_values(self) -> 'MetamodelBuilder':
		""" Switch on when Values stored in polymorphic collections (list, list[object], ...) must be deserialized back into their own type. """
		context = self._configuring_context("enable type safe values")
		context.converter_builder.type_safe_values(True)
		context.configuration.type_safe_values = True
		return self

	def set_mapping_style(self, style: MappingStyle | str) -> 'MetamodelBuilder':
		""" MappingStyle.FIELD by default. """
		context = self._configuring_context("change the mapping style")
		context.configuration.with_mapping_style(MappingStyle.parse(style))
		return self

	## Finalization ##

	def build(self) -> Metamodel:
		if self._state is not BootState.CONFIGURING:
			raise IllegalLifecycleState(f"build() can only be called once, from the {BootState.CONFIGURING} state. Current state: {self._state}.")
		context = self._context
		if context is None:
			raise InternalInvariantViolation(f"The builder is in state {self._state} but holds no configuration context.")

		try:
			# Bootstrap phase 2: converter
			self._transition(BootState.BOOTING_SERIALIZATION)
			converter = self._boot_converter(context)

			# Bootstrap phase 3: managed class resolution & registration
			self._transition(BootState.RESOLVING_METADATA)
			self._boot_managed_classes(context)
		except Exception as e:
			self._abort(context, e)
			raise

		self._transition(BootState.READY)
		self._metamodel = Metamodel(
			type_registry=context.type_registry,
			converter=converter,
			configuration=context.configuration.freeze()
		)
		# No configuration state survives into the ready system
		self._context = None
		get_logger().info(f"Metamodel is up & ready with {len(context.type_registry)} managed types.")
		return self._metamodel

	## Phases ##

	def _boot_core(self) -> BootContext:
		return BootContext(
			configuration=CoreConfiguration(),
			definitions=DefinitionSet(),
			converter_builder=ConverterBuilder(),
			type_registry=TypeRegistry()
		)

	def _boot_converter(self, context: BootContext) -> Converter:
		# Codecs are bound from the final definitions only
		for definition in context.definitions:
			if isinstance(definition, ValueTypeDeclaration) and definition.codec is not None:
				context.converter_builder.register_codec(definition.codec)
		return context.converter_builder.build()

	def _boot_managed_classes(self, context: BootContext) -> None:
		""" Resolve everything first, then publish, so a malformed class never leaves a half-filled registry.
		Entities and value objects go through publish_all(), Values through the registry's value channel.
		The DefinitionSet holds each class once, so neither write can collide with the other. """
		factory = ManagedClassFactory(context.configuration.mapping_style)
		get_logger().debug(f"Resolving {len(context.definitions)} definition(s) with {factory.mapping_style} mapping.")

		managed_types = [factory.create(definition) for definition in context.definitions]
		structural = [managed_type for managed_type in managed_types if not isinstance(managed_type, ValueType)]
		values = [(managed_type.cls, managed_type.codec) for managed_type in managed_types if isinstance(managed_type, ValueType)]

		context.type_registry.publish_all(structural)
		context.type_registry.register_value_types(values)
		context.type_registry.seal()

	def _abort(self, context: BootContext, error: Exception) -> None:
		failed_in = self._state
		self._transition(BootState.FAILED)
		# Nothing may be registered into an aborted registry
		context.type_registry.seal()
		offending_cls = getattr(error, "cls", None)
		if offending_cls is not None:
			get_logger().error(f"Metamodel build failed during {failed_in} on class '{offending_cls.__qualname__}': {error}")
		else:
			get_logger().error(f"Metamodel build failed during {failed_in}: {error}")

	## Helpers ##

	def _transition(self, target: BootState) -> None:
		if not is_valid_transition(self._state, target):
			raise InternalInvariantViolation(f"Invalid bootstrap transition {self._state} -> {target}.")
		get_logger().debug(f"Bootstrap: {self._state} -> {target}")
		self._state = target

	def _configuring_context(self, action: str) -> BootContext:
		if self._state is not BootState.CONFIGURING or self._context is None:
			raise IllegalLifecycleState(f"Cannot {action} in state {self._state}. The configuration window is closed once build() is called.")
		return self._context


def metamodel_builder() -> MetamodelBuilder:
	return MetamodelBuilder()
