from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar


T = TypeVar('T')

class Codec(ABC, Generic[T]):
	""" Binds a custom (de)serialization strategy to a Value type.

	Subclasses set `value_type` (as a class attribute or in __init__) and implement to_bson / from_bson.

	Example:
		class MoneyCodec(Codec[Money]):
			value_type = Money
			def to_bson(self, obj: Money) -> str:
				return f"{obj.amount} {obj.currency}"
			def from_bson(self, bson: str) -> Money:
				amount, currency = bson.split(" ")
				return Money(Decimal(amount), currency)
	"""
	value_type: type[T]

	@abstractmethod
	def to_bson(self, obj: T) -> Any:
		""" Converts a value into its BSON-compatible representation. """

	@abstractmethod
	def from_bson(self, bson: Any) -> T:
		""" Rebuilds a value from the output of to_bson(). """

	def __repr__(self) -> str:
		value_type = getattr(self, "value_type", None)
		return f"{type(self).__name__}({getattr(value_type, '__qualname__', value_type)})"


class FunctionCodec(Codec[T]):
	""" Codec built from a pair of plain functions. """

	def __init__(self, value_type: type[T], to_bson: Callable[[T], Any], from_bson: Callable[[Any], T]) -> None:
		self.value_type = value_type
		self._to_bson = to_bson
		self._from_bson = from_bson

	def to_bson(self, obj: T) -> Any:
		return self._to_bson(obj)

	def from_bson(self, bson: Any) -> T:
		return self._from_bson(bson)
