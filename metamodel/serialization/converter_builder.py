from .codec import Codec
from .converter import Converter
from ..utilities.logger import get_logger
from ..utilities.setup_error import IllegalLifecycleState, InternalInvariantViolation, InvalidArgument


class ConverterBuilder:
	""" Accumulates codec bindings during the configuration window and freezes them into a Converter, exactly once. """

	def __init__(self) -> None:
		self._codecs: dict[type, Codec] = {}
		self._type_safe_values = False
		self._frozen = False

	@property
	def frozen(self) -> bool:
		return self._frozen

	def register_codec(self, codec: Codec) -> 'ConverterBuilder':
		""" Binds codec to codec.value_type. A later codec for the same class replaces the former one. """
		self._assert_not_frozen("register a codec")
		value_type = getattr(codec, "value_type", None)
		if not isinstance(value_type, type):
			raise InvalidArgument(f"Codec {type(codec).__name__} must declare a value_type class, got {value_type!r}.")
		self._codecs[value_type] = codec
		return self

	def type_safe_values(self, enabled: bool = True) -> 'ConverterBuilder':
		self._assert_not_frozen("change type_safe_values")
		self._type_safe_values = enabled
		return self

	def build(self) -> Converter:
		""" Freezes the builder. Called once by the bootstrap pipeline, a second call is an internal error. """
		if self._frozen:
			raise InternalInvariantViolation("ConverterBuilder.build() was called twice. The converter may only be frozen once.")
		self._frozen = True
		get_logger().debug(f"Freezing converter with {len(self._codecs)} codec(s).")
		return Converter(self._codecs, type_safe_values=self._type_safe_values)

	def _assert_not_frozen(self, action: str) -> None:
		if self._frozen:
			raise IllegalLifecycleState(f"Cannot {action}: the converter has already been built.")
