from .managed_types import Entity, ManagedType, ValueObject, ValueType
from .managed_class_factory import ManagedClassFactory
