"""
Domain metamodel bootstrap.

Declare your domain classes as Entities, ValueObjects and Values on a MetamodelBuilder, then call
build() once. The returned Metamodel holds a sealed TypeRegistry of resolved class metadata and a
frozen Converter for the Values you bound codecs to.
"""

from .bootstrap import BootState, Metamodel, MetamodelBuilder, metamodel_builder
from .configuration import MappingStyle
from .definitions import Definition, EntityDefinition, ValueObjectDefinition, ValueTypeDeclaration
from .metadata import Entity, ManagedClassFactory, ManagedType, ValueObject, ValueType
from .properties import Id, MemberKind, Property, PropertyShape, Transient
from .registration import TypeRegistry
from .serialization import Codec, Converter, FunctionCodec
from .utilities.logger import set_log_level, set_logger
from .utilities.setup_error import (
    DuplicateRegistration,
    IdPropertyNotFound,
    IllegalLifecycleState,
    InternalInvariantViolation,
    InvalidArgument,
    MetadataResolutionError,
    NoIdPropertyFound,
    PropertyResolutionError,
    SetupError,
    UnknownManagedType,
)
