from .type_registry import TypeNameDict, TypeRegistry
