from .codec import Codec, FunctionCodec
from .converter import Converter
from .converter_builder import ConverterBuilder
