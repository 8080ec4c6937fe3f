from .definition import Definition, EntityDefinition, ValueObjectDefinition, ValueTypeDeclaration
from .definition_set import DefinitionSet
