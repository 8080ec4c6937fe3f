from enum import Enum
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, TypeVar

from bidict import bidict
from bson import json_util

from .codec import Codec
from .primitive_to_bson import bson_to_primitive, is_primitive_cls, primitive_to_bson
from .vars import __type_id__, __value__, get_type_id
from ..utilities.type_name import unique_type_name


T = TypeVar('T')

SEQUENCE_TYPES: tuple[type, ...] = (list, tuple, set, frozenset)

class Converter:
	""" Immutable converter produced by ConverterBuilder.build().

	Values are converted in this order (from specific to general):
		1. codec-bound Values (exact class first, then the nearest registered base class)
		2. primitives (exact type match)
		3. sequences, element by element
		4. enums, by value
	Anything else is not serializable.
	"""

	def __init__(self, codecs: Mapping[type, Codec], type_safe_values: bool = False) -> None:
		self._codecs: Mapping[type, Codec] = MappingProxyType(dict(codecs))
		self._type_safe_values = type_safe_values
		self._type_id_dict: bidict[str, type] = bidict()
		for cls in self._codecs:
			# Same-named classes get distinct type ids, in registration order
			self._type_id_dict[unique_type_name(cls, self._type_id_dict)] = cls

	def __repr__(self) -> str:
		return f"Converter(codecs={list(self._type_id_dict)}, type_safe_values={self._type_safe_values})"

	@property
	def codecs(self) -> Mapping[type, Codec]:
		return self._codecs

	@property
	def type_safe_values(self) -> bool:
		return self._type_safe_values

	def has_codec(self, cls: type) -> bool:
		return self.codec_for(cls) is not None

	def codec_for(self, cls: type) -> Codec | None:
		""" Returns the codec bound to cls or to its nearest base class. """
		codec = self._codecs.get(cls)
		if codec is not None:
			return codec
		for base in cls.__mro__[1:]:
			if base in self._codecs:
				return self._codecs[base]
		return None

	def to_bson(self, obj: Any) -> Any:
		""" Serializes a Python object into a BSON-compatible structure. """
		if obj is None:
			return None

		codec = self.codec_for(type(obj))
		if codec is not None:
			bson = codec.to_bson(obj)
			if self._type_safe_values:
				return { __type_id__: self._type_id_dict.inverse[codec.value_type], __value__: bson }
			return bson

		# First try to catch primitives based on an exact type match. This should not allow for inheritance, and should be checked before
		# sequences and enums, as StrEnum and IntEnum members are also str and int instances.
		if is_primitive_cls(type(obj)):
			return primitive_to_bson(obj)
		
		elif type(obj) in SEQUENCE_TYPES:
			return [self.to_bson(item) for item in obj]
		
		elif isinstance(obj, Enum):
			return obj.value

		raise TypeError(f"Type {type(obj).__name__} not serializable. Declare it as a Value with a codec.")

	def from_bson(self, bson: Any, cls: type[T]) -> T | None:
		""" Deserializes a BSON-compatible structure into an instance of cls. """
		if bson is None:
			return None

		type_id = get_type_id(bson)
		if type_id is not None:
			return self._from_type_safe_value(bson, type_id, cls)

		codec = self.codec_for(cls)
		if codec is not None:
			return codec.from_bson(bson)
		
		if is_primitive_cls(cls):
			return bson_to_primitive(bson, cls)
		
		elif cls in SEQUENCE_TYPES:
			if not isinstance(bson, list):
				raise ValueError(f"Expected a list for {cls.__name__}. Instead received {type(bson).__name__}.")
			# Without an element type, only type-safe values can be restored. Other elements are kept as they are.
			return cls(self._from_untyped(element) for element in bson) # type: ignore[call-arg]
		
		elif isinstance(cls, type) and issubclass(cls, Enum):
			try:
				return cls(bson)
			except ValueError as e:
				raise ValueError(f"Error deserializing Enum {cls.__name__}: {e}.") from e

		raise TypeError(f"Unable to deserialize unregistered expected type {getattr(cls, '__name__', cls)}.")

	def to_json(self, obj: Any) -> str:
		""" Serializes obj into Extended JSON text. """
		return json_util.dumps(self.to_bson(obj))

	def from_json(self, text: str, cls: type[T]) -> T | None:
		return self.from_bson(json_util.loads(text), cls)

	def _from_untyped(self, bson: Any) -> Any:
		type_id = get_type_id(bson)
		if type_id is None:
			return bson
		return self._from_type_safe_value(bson, type_id, None)

	def _from_type_safe_value(self, bson: dict, type_id: str, expected_cls: type | None) -> Any:
		value_type = self._type_id_dict.get(type_id)
		if value_type is None:
			raise ValueError(f"Type-safe value asserted an unrecognized {__type_id__} '{type_id}'.")
		if expected_cls is not None and expected_cls not in SEQUENCE_TYPES and not issubclass(value_type, expected_cls):
			raise ValueError(f"Type-safe value of type '{type_id}' is not a subclass of expected type '{expected_cls.__name__}'.")
		return self._codecs[value_type].from_bson(bson[__value__])
