"""Tests for the pending definition set and mapping style parsing."""

from __future__ import annotations

import pytest

from metamodel import EntityDefinition, InvalidArgument, MappingStyle, ValueObjectDefinition, ValueTypeDeclaration
from metamodel.definitions import DefinitionSet
from tests.sample_domain import Address, Money, SimpleEntity


class TestDefinitionSet:
    def test_add_and_get(self) -> None:
        definitions = DefinitionSet()
        definitions.add(ValueObjectDefinition(Address))
        assert Address in definitions
        assert definitions.get(Address) == ValueObjectDefinition(Address)
        assert definitions.get(Money) is None

    def test_same_class_replaces(self) -> None:
        definitions = DefinitionSet()
        definitions.add(EntityDefinition(SimpleEntity, "id"))
        definitions.add(EntityDefinition(SimpleEntity, "name"))
        assert len(definitions) == 1
        assert list(definitions) == [EntityDefinition(SimpleEntity, "name")]

    def test_other_kind_replaces(self) -> None:
        definitions = DefinitionSet()
        definitions.add(ValueObjectDefinition(SimpleEntity))
        definitions.add(EntityDefinition(SimpleEntity))
        definitions.add(ValueTypeDeclaration(Money))
        assert list(definitions) == [EntityDefinition(SimpleEntity), ValueTypeDeclaration(Money)]

    def test_iteration_is_a_snapshot(self) -> None:
        definitions = DefinitionSet()
        definitions.add(ValueObjectDefinition(Address))
        for _ in definitions:
            definitions.add(ValueTypeDeclaration(Money))
        assert len(definitions) == 2


class TestMappingStyle:
    def test_members(self) -> None:
        assert {s.value for s in MappingStyle} == {"field", "accessor"}

    @pytest.mark.parametrize(
        ("given", "expected"),
        [
            (MappingStyle.FIELD, MappingStyle.FIELD),
            ("accessor", MappingStyle.ACCESSOR),
            ("FIELD", MappingStyle.FIELD),
        ],
    )
    def test_parse(self, given, expected) -> None:
        assert MappingStyle.parse(given) is expected

    @pytest.mark.parametrize("given", [None, "bean", 3, ""])
    def test_parse_rejects(self, given) -> None:
        with pytest.raises(InvalidArgument):
            MappingStyle.parse(given)
