from typing import Any

from .get_type_info import get_type_info_list
from .type_expectation import TypeExpectation
from .type_info import TypeInfo


def get_type_expectation_from_type_annotation(type_annotation: Any) -> TypeExpectation:
	"""	Reduces a property annotation to the single type a property holds, plus whether it may be None.
	`X | None` keeps X. A Union of several non-None types (`int | str`) holds a value of any of them, so it resolves to Any.
	"""
	type_info_list = get_type_info_list(type_annotation)
	non_null_type_infos = [type_info for type_info in type_info_list if type_info.type_ is not type(None)]
	is_nullable = len(non_null_type_infos) < len(type_info_list)

	if len(non_null_type_infos) == 1:
		type_info = non_null_type_infos[0]
	else:
		type_info = TypeInfo(type_=Any, sub_type=None)

	return TypeExpectation(
		type_info=type_info,
		is_nullable=is_nullable
	)
