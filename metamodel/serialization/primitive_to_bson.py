from datetime import datetime
from typing import Any



PRIMITIVES: tuple[type, ...] = (dict, datetime, str, float, int, bool)
""" Types the converter passes through unchanged. Exact type match only, subclasses are not primitives. """

SCALAR_LEAVES: tuple[type, ...] = (datetime, str, float, int, bool, type(None))

def is_primitive_cls(cls: type) -> bool:
	return cls in PRIMITIVES # Primitive should exactly match a primitive type, not be a subclass

def validate_primitive_structure(value: Any, path: str = "$") -> None:
	""" Raises TypeError if a raw dict holds anything but nested dicts, lists and scalar leaves. """
	if isinstance(value, dict):
		for key, item in value.items():
			if not isinstance(key, SCALAR_LEAVES):
				raise TypeError(f"Dict at {path} has a non-primitive key of type {type(key).__name__}.")
			validate_primitive_structure(item, f"{path}.{key}")
	elif isinstance(value, list):
		for idx, item in enumerate(value):
			validate_primitive_structure(item, f"{path}[{idx}]")
	elif not isinstance(value, SCALAR_LEAVES):
		raise TypeError(f"Structure contains non-primitive value of type {type(value).__name__} at {path}.")

def primitive_to_bson(obj: Any) -> Any:
	""" Converts a primitive object to its BSON representation. """
	if type(obj) is dict:
		validate_primitive_structure(obj)
		return obj
	elif type(obj) is datetime:
		return obj # The bson encoder handles datetimes natively, so you should pass them as datetime objects
	elif type(obj) in (str, float, int, bool):
		return obj
	else:
		raise TypeError(f"Unable to convert invalid primitive type {type(obj).__name__} to BSON.")

def bson_to_primitive(bson: Any, expected_type: type) -> Any:
	""" Converts a BSON value to the expected primitive type. """
	if expected_type is dict:
		if not isinstance(bson, dict):
			raise ValueError(f"{bson!r} not of the expected type dict.")
		return bson
	
	elif expected_type is datetime:
		if not isinstance(bson, datetime):
			raise ValueError(f"{bson!r} not of the expected type datetime.")
		return bson
	
	elif expected_type is str:
		if not isinstance(bson, str): 
			raise ValueError(f"{bson!r} not of the expected type str.")
		return str(bson)
	
	elif expected_type is float:
		try:
			return float(bson)
		except (TypeError, ValueError) as e:
			raise ValueError(f"{bson!r} not convertible to expected type float.") from e
	
	elif expected_type is bool:
		if not isinstance(bson, bool): 
			raise ValueError(f"{bson!r} not of the expected type bool.")
		return bool(bson)
	
	elif expected_type is int:
		# bool is an int subclass but never a valid int value here
		if not isinstance(bson, int) or isinstance(bson, bool): 
			raise ValueError(f"{bson!r} not of the expected type int.")
		return int(bson)
	
	else:
		raise ValueError(f"Unable to deserialize invalid primitive type {expected_type}.")
