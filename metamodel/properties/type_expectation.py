from dataclasses import dataclass

from .type_info import TypeInfo


@dataclass(frozen=True)
class TypeExpectation:
	type_info: TypeInfo
	is_nullable: bool

	def __str__(self) -> str:
		output = str(self.type_info)
		if self.is_nullable:
			output += " | None"
		return output
