"""Tests for resolving definitions into managed class metadata."""

from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from metamodel import (
    Entity,
    EntityDefinition,
    IdPropertyNotFound,
    NoIdPropertyFound,
    ValueObject,
    ValueObjectDefinition,
    ValueType,
    ValueTypeDeclaration,
)
from tests.sample_domain import (
    Address,
    AmbiguousUser,
    AuditedChild,
    ConventionDocument,
    Customer,
    MarkedUser,
    MarkerBeatsConvention,
    Money,
    MoneyCodec,
    NoIdThing,
    Person,
    SimpleEntity,
)


class TestEntityResolution:
    def test_explicit_id_property(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(SimpleEntity, "id"))
        assert isinstance(entity, Entity)
        assert entity.cls is SimpleEntity
        assert entity.id_property.name == "id"
        assert [p.name for p in entity.properties] == ["name"]

    def test_explicit_id_property_overrides_marker(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(MarkedUser, "name"))
        assert entity.id_property.name == "name"
        assert [p.name for p in entity.properties] == ["login"]

    def test_missing_explicit_id_property(self, field_factory) -> None:
        with pytest.raises(IdPropertyNotFound, match="uuid") as exc_info:
            field_factory.create(EntityDefinition(SimpleEntity, "uuid"))
        assert exc_info.value.cls is SimpleEntity
        assert "SimpleEntity" in str(exc_info.value)

    def test_id_marker(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(MarkedUser))
        assert entity.id_property.name == "login"
        assert [p.name for p in entity.properties] == ["name"]

    def test_inherited_id_marker(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(AuditedChild))
        assert entity.id_property.name == "id"
        assert [p.name for p in entity.properties] == ["created_by", "title"]

    def test_ambiguous_id_markers(self, field_factory) -> None:
        with pytest.raises(NoIdPropertyFound, match="Ambiguous") as exc_info:
            field_factory.create(EntityDefinition(AmbiguousUser))
        assert exc_info.value.candidates == ["login", "email"]

    def test_no_id_candidate(self, field_factory) -> None:
        with pytest.raises(NoIdPropertyFound, match="Missing") as exc_info:
            field_factory.create(EntityDefinition(NoIdThing))
        assert exc_info.value.candidates == []

    def test_naming_convention(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(ConventionDocument))
        assert entity.id_property.name == "_id"
        entity = field_factory.create(EntityDefinition(SimpleEntity))
        assert entity.id_property.name == "id"

    def test_marker_beats_convention(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(MarkerBeatsConvention))
        assert entity.id_property.name == "code"

    def test_accessor_mapping(self, accessor_factory) -> None:
        entity = accessor_factory.create(EntityDefinition(Customer))
        assert entity.id_property.name == "person_id"
        assert [p.name for p in entity.properties] == ["name", "email", "loyalty_points"]
        assert entity.get_id(Customer(3, "Sam", "sam@shire.me")) == 3

    def test_accessor_mapping_ignores_fields(self, accessor_factory) -> None:
        with pytest.raises(NoIdPropertyFound):
            accessor_factory.create(EntityDefinition(SimpleEntity))

    def test_field_mapping_ignores_accessors(self, field_factory) -> None:
        with pytest.raises(NoIdPropertyFound):
            field_factory.create(EntityDefinition(Person))

    def test_get_property(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(SimpleEntity, "id"))
        assert entity.get_property("id") is entity.id_property
        assert entity.get_property("name").name == "name"
        assert entity.get_property("nope") is None


class TestValueObjectAndValueResolution:
    def test_value_object(self, field_factory) -> None:
        value_object = field_factory.create(ValueObjectDefinition(Address))
        assert isinstance(value_object, ValueObject)
        assert [p.name for p in value_object.properties] == ["street", "city"]

    def test_value_object_keeps_id_like_fields(self, field_factory) -> None:
        value_object = field_factory.create(ValueObjectDefinition(SimpleEntity))
        assert [p.name for p in value_object.properties] == ["id", "name"]

    def test_value_type_carries_codec(self, field_factory) -> None:
        codec = MoneyCodec()
        value_type = field_factory.create(ValueTypeDeclaration(Money, codec))
        assert value_type == ValueType(Money, codec)

    def test_output_is_immutable(self, field_factory) -> None:
        entity = field_factory.create(EntityDefinition(SimpleEntity, "id"))
        with pytest.raises(FrozenInstanceError):
            entity.cls = Address  # type: ignore[misc]
        assert isinstance(entity.properties, tuple)

    def test_resolution_is_deterministic(self, field_factory) -> None:
        first = field_factory.create(EntityDefinition(AuditedChild))
        second = field_factory.create(EntityDefinition(AuditedChild))
        assert first == second
