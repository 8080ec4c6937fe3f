from collections.abc import Iterator

from .definition import Definition
from ..utilities.logger import get_logger


class DefinitionSet:
	""" Pending definitions keyed by class.

	A later definition for the same class replaces the former one, whatever its kind.
	(Declaring a class as a ValueObject and then as an Entity leaves only the Entity definition.)
	"""

	def __init__(self) -> None:
		self._definitions: dict[type, Definition] = {}

	def add(self, definition: Definition) -> None:
		previous = self._definitions.get(definition.cls)
		if previous is not None and previous != definition:
			get_logger().debug(f"Replacing {type(previous).__name__} of '{definition.cls.__qualname__}' with {type(definition).__name__}.")
		self._definitions[definition.cls] = definition

	def get(self, cls: type) -> Definition | None:
		return self._definitions.get(cls)

	def __contains__(self, cls: object) -> bool:
		return cls in self._definitions

	def __len__(self) -> int:
		return len(self._definitions)

	def __iter__(self) -> Iterator[Definition]:
		return iter(tuple(self._definitions.values()))
