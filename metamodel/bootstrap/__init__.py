from .boot_state import BootState
from .metamodel import Metamodel
from .metamodel_builder import BootContext, MetamodelBuilder, metamodel_builder
