from .mapping_style import MappingStyle
from .core_configuration import CoreConfiguration, FrozenCoreConfiguration
