from dataclasses import dataclass
from typing import Any, ForwardRef


@dataclass(frozen=True)
class TypeInfo:
	""" Stores type information. If the type is a sequence, the element type will be stored within the sub_type field.
	For example list[str] will produce: type_ = list, sub_type = str
	"""
	type_: Any
	sub_type: type | ForwardRef | str | None

	def __str__(self) -> str:
		output = getattr(self.type_, "__name__", str(self.type_))
		if self.sub_type is not None:
			if isinstance(self.sub_type, type):
				output += f"[{self.sub_type.__name__}]"
			else:
				output += f"[{self.sub_type}]" # Handle ForwardRefs
		return output
