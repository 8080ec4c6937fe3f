class Marker:
    """ Metadata marker placed inside typing.Annotated, e.g. `id: Annotated[int, Id]`.
    Markers are singletons, so they are compared by identity. """
    _instances: dict[str, 'Marker'] = {}

    def __new__(cls, name: str):
        if name not in cls._instances:
            instance = super().__new__(cls)
            instance.name = name
            cls._instances[name] = instance
        return cls._instances[name]

    def __repr__(self):
        return self.name


Id = Marker("Id")
"""
Marks the identity property of an Entity.
    - Field mapping: `id: Annotated[int, Id]`
    - Accessor mapping: `def id(self) -> Annotated[int, Id]: ...` on a @property
"""

Transient = Marker("Transient")
""" Excludes a property from the managed class metadata. ClassVar attributes are always excluded. """
