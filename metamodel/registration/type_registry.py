from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

from bidict import bidict

from ..metadata.managed_types import Entity, ManagedType, ValueObject, ValueType
from ..serialization.primitive_to_bson import is_primitive_cls
from ..utilities.logger import get_logger
from ..utilities.setup_error import DuplicateRegistration, IllegalLifecycleState, UnknownManagedType
from ..utilities.type_name import type_name, unique_type_name

if TYPE_CHECKING:
    from ..serialization.codec import Codec


class TypeNameDict(bidict[str, type]):
    def add(self, type_: type) -> str:
        """Register a single type by its qualified name. A class whose name is already held by another class is suffixed (#2, #3, ...)."""
        name = unique_type_name(type_, self)
        if name != type_name(type_):
            get_logger().debug(f"Type name '{type_name(type_)}' is already taken, registering '{type_.__qualname__}' as '{name}'.")
        self[name] = type_
        return name


class TypeRegistry:
    """ Published managed class metadata, keyed by class.

    Entries are written once, by the bootstrap pipeline, and the registry is sealed before it is handed out.
    After that it is read-only and safe for concurrent readers. """

    def __init__(self) -> None:
        self._managed_types: dict[type, ManagedType] = {}
        self.type_name_dict: TypeNameDict = TypeNameDict()
        """ Qualified type name <-> class, for every registered class. """
        self._sealed = False

    def __repr__(self) -> str:
        return f"TypeRegistry({len(self)} types, sealed={self._sealed})"

    @property
    def sealed(self) -> bool:
        return self._sealed

    ## Writes (pipeline only) ##

    def publish(self, cls: type, managed_type: ManagedType) -> None:
        """ Publishes the metadata of a single class. """
        if managed_type.cls is not cls:
            raise ValueError(f"Metadata for '{managed_type.cls.__qualname__}' cannot be published under '{cls.__qualname__}'.")
        self.publish_all([managed_type])

    def publish_all(self, managed_types: Iterable[ManagedType]) -> None:
        """ Publishes a batch of metadata. Every class is checked before anything is written, so a failed batch leaves the registry untouched.
        Registration is keyed by the class object, never by its name. """
        self._assert_writable()
        batch = list(managed_types)

        seen: set[type] = set()
        for managed_type in batch:
            cls = managed_type.cls
            if cls in self._managed_types or cls in seen:
                raise DuplicateRegistration(cls)
            seen.add(cls)

        for managed_type in batch:
            self._managed_types[managed_type.cls] = managed_type
            name = self.type_name_dict.add(managed_type.cls)
            get_logger().debug(f"Published {type(managed_type).__name__} '{name}'.")

    def register_value_type(self, cls: type, codec: 'Codec | None' = None) -> ValueType:
        """ Value channel: scalar Values need no structural resolution. """
        return self.register_value_types([(cls, codec)])[0]

    def register_value_types(self, declarations: Iterable[tuple[type, 'Codec | None']]) -> tuple[ValueType, ...]:
        """ Value channel for a batch of (class, codec) pairs. All or nothing, like publish_all(). """
        value_types = tuple(ValueType(cls=cls, codec=codec) for cls, codec in declarations)
        self.publish_all(value_types)
        return value_types

    def seal(self) -> None:
        self._sealed = True

    def _assert_writable(self) -> None:
        if self._sealed:
            raise IllegalLifecycleState("The type registry is sealed. No class can be registered after build().")

    ## Reads ##

    def lookup(self, cls: type) -> ManagedType | None:
        """ Returns None if the class is not registered. """
        return self._managed_types.get(cls)

    def lookup_by_name(self, name: str) -> ManagedType | None:
        """ Looks a class up by its qualified name (module.QualName). """
        cls = self.type_name_dict.get(name)
        if cls is None:
            return None
        return self._managed_types[cls]

    def get(self, cls: type) -> ManagedType:
        """ Like lookup(), but raises UnknownManagedType for unregistered classes. """
        managed_type = self._managed_types.get(cls)
        if managed_type is None:
            raise UnknownManagedType(cls)
        return managed_type

    def type_to_name(self, cls: type) -> str | None:
        """ Return the registered name of the class. """
        return self.type_name_dict.inverse.get(cls)

    def is_entity(self, cls: type) -> bool:
        return isinstance(self._managed_types.get(cls), Entity)

    def is_value_object(self, cls: type) -> bool:
        return isinstance(self._managed_types.get(cls), ValueObject)

    def is_value(self, cls: type) -> bool:
        return isinstance(self._managed_types.get(cls), ValueType)

    def is_primitive_cls(self, cls: type) -> bool:
        """Returns True if the class is a primitive type."""
        return is_primitive_cls(cls)

    def entities(self) -> tuple[Entity, ...]:
        return tuple(managed_type for managed_type in self._managed_types.values() if isinstance(managed_type, Entity))

    def value_objects(self) -> tuple[ValueObject, ...]:
        return tuple(managed_type for managed_type in self._managed_types.values() if isinstance(managed_type, ValueObject))

    def value_types(self) -> tuple[ValueType, ...]:
        return tuple(managed_type for managed_type in self._managed_types.values() if isinstance(managed_type, ValueType))

    def __len__(self) -> int:
        return len(self._managed_types)

    def __contains__(self, cls: object) -> bool:
        return cls in self._managed_types

    def __iter__(self) -> Iterator[ManagedType]:
        return iter(tuple(self._managed_types.values()))
