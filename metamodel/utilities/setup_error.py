class SetupError(Exception):
    """Exception raised for metamodel configuration and bootstrap errors.

    Messages are meant to be read by the developer configuring the builder, so they
    always name the offending class when there is one. """

    def __init__(self, message: str, cls: type | None = None):
        self.message = message
        self.cls = cls
        super().__init__(self.message)


class InvalidArgument(SetupError, ValueError):
    """ None or malformed input to a configuration call. Recoverable: fix the call and retry before build(). """


class IllegalLifecycleState(SetupError, RuntimeError):
    """ A configuration or build call was made in the wrong pipeline state. """


class MetadataResolutionError(SetupError):
    """ Raised while resolving a definition into managed class metadata. Aborts the whole build. """


class IdPropertyNotFound(MetadataResolutionError):
    """ An explicitly named id-property does not exist on the entity class. """

    def __init__(self, cls: type, id_property_name: str, available: list[str]):
        self.id_property_name = id_property_name
        super().__init__(
            f"Id-property '{id_property_name}' not found in entity class '{cls.__qualname__}'. "
            f"Available properties: {', '.join(available) or '<none>'}.",
            cls
        )


class NoIdPropertyFound(MetadataResolutionError):
    """ No id-property was named and the class does not carry exactly one identity candidate. """

    def __init__(self, cls: type, candidates: list[str]):
        self.candidates = candidates
        if candidates:
            message = (f"Ambiguous identity in entity class '{cls.__qualname__}': "
                       f"found {len(candidates)} id-property candidates ({', '.join(candidates)}). "
                       "Mark exactly one property with Id or pass id_property_name explicitly.")
        else:
            message = (f"Missing identity in entity class '{cls.__qualname__}': no property is marked with Id "
                       "and none follows the id naming convention. Mark one property with Id or pass id_property_name explicitly.")
        super().__init__(message, cls)


class PropertyResolutionError(MetadataResolutionError):
    """ A property of the class could not be resolved (e.g. an unresolvable type annotation). """


class DuplicateRegistration(SetupError):
    """ The pipeline attempted to publish a class twice. This is a pipeline bug, never a user error. """

    def __init__(self, cls: type, message: str | None = None):
        super().__init__(message or f"Class '{cls.__qualname__}' is already registered in the type registry.", cls)


class InternalInvariantViolation(SetupError):
    """ An internal bootstrap invariant was broken (e.g. the converter builder was frozen twice). """


class UnknownManagedType(SetupError, KeyError):
    """ Lookup of a class which was never registered. """

    def __init__(self, cls: type):
        super().__init__(f"Class '{getattr(cls, '__qualname__', cls)}' is not registered in the type registry.", cls)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message
