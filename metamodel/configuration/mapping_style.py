from enum import StrEnum
from typing import Any

from ..utilities.setup_error import InvalidArgument


class MappingStyle(StrEnum):
	""" Decides how the properties of a managed class are discovered. """
	FIELD = "field"
	""" Annotated instance attributes. This is the default. """
	ACCESSOR = "accessor"
	""" @property members. """

	@classmethod
	def parse(cls, style: Any) -> 'MappingStyle':
		""" Accepts a MappingStyle or its string value. Raises InvalidArgument for None or anything unrecognized. """
		if style is None:
			raise InvalidArgument("Mapping style must not be None.")
		if isinstance(style, MappingStyle):
			return style
		if isinstance(style, str):
			try:
				return cls(style.lower())
			except ValueError:
				pass
		allowed = ", ".join(repr(member.value) for member in cls)
		raise InvalidArgument(f"Unrecognized mapping style {style!r}. Expected one of {allowed}.")
