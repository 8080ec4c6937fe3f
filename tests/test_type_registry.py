"""Tests for TypeRegistry publication and lookups."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import pytest

from metamodel import (
    DuplicateRegistration,
    EntityDefinition,
    IllegalLifecycleState,
    TypeRegistry,
    UnknownManagedType,
    ValueObject,
    ValueType,
)
from metamodel.utilities.type_name import type_name
from tests.sample_domain import Address, Money, MoneyCodec, SimpleEntity, make_point_class


@pytest.fixture
def registry() -> TypeRegistry:
    return TypeRegistry()


class TestPublish:
    def test_publish_and_lookup(self, registry: TypeRegistry) -> None:
        address = ValueObject(Address, ())
        registry.publish(Address, address)
        assert registry.lookup(Address) is address
        assert Address in registry
        assert len(registry) == 1

    def test_publish_rejects_mismatched_key(self, registry: TypeRegistry) -> None:
        with pytest.raises(ValueError):
            registry.publish(Money, ValueObject(Address, ()))

    def test_duplicate(self, registry: TypeRegistry) -> None:
        registry.publish(Address, ValueObject(Address, ()))
        with pytest.raises(DuplicateRegistration, match="Address"):
            registry.publish(Address, ValueObject(Address, ()))
        # The first entry is never overwritten
        assert len(registry) == 1

    def test_publish_all_is_atomic(self, registry: TypeRegistry) -> None:
        batch = [ValueObject(Address, ()), ValueType(Money), ValueObject(Address, ())]
        with pytest.raises(DuplicateRegistration):
            registry.publish_all(batch)
        assert len(registry) == 0
        assert registry.lookup(Money) is None
        assert len(registry.type_name_dict) == 0

    def test_value_channel(self, registry: TypeRegistry) -> None:
        codec = MoneyCodec()
        value_type = registry.register_value_type(Money, codec)
        assert registry.lookup(Money) == ValueType(Money, codec)
        assert value_type.codec is codec
        with pytest.raises(DuplicateRegistration):
            registry.register_value_type(Money)

    def test_value_channel_batch_is_atomic(self, registry: TypeRegistry) -> None:
        registry.publish(Address, ValueObject(Address, ()))
        with pytest.raises(DuplicateRegistration, match="Address"):
            registry.register_value_types([(Money, None), (Address, None)])
        assert registry.lookup(Money) is None
        assert registry.register_value_types([(Money, None), (Decimal, None)]) == (ValueType(Money), ValueType(Decimal))
        assert registry.is_value(Decimal)

    def test_same_named_classes_are_distinct_entries(self, registry: TypeRegistry) -> None:
        first, second = make_point_class(), make_point_class()
        assert type_name(first) == type_name(second)

        registry.publish_all([ValueObject(first, ()), ValueObject(second, ())])

        assert registry.lookup(first).cls is first
        assert registry.lookup(second).cls is second
        assert registry.type_to_name(first) == type_name(first)
        assert registry.type_to_name(second) == f"{type_name(second)}#2"
        assert registry.lookup_by_name(f"{type_name(first)}#2").cls is second
        with pytest.raises(DuplicateRegistration):
            registry.publish(first, ValueObject(first, ()))

    def test_sealed_registry_rejects_writes(self, registry: TypeRegistry) -> None:
        registry.seal()
        assert registry.sealed
        with pytest.raises(IllegalLifecycleState):
            registry.publish(Address, ValueObject(Address, ()))
        with pytest.raises(IllegalLifecycleState):
            registry.register_value_type(Money)
        assert len(registry) == 0


class TestLookups:
    @pytest.fixture
    def populated(self, registry: TypeRegistry, field_factory) -> TypeRegistry:
        registry.publish_all([
            field_factory.create(EntityDefinition(SimpleEntity, "id")),
            ValueObject(Address, ()),
            ValueType(Money),
        ])
        registry.seal()
        return registry

    def test_kind_checks(self, populated: TypeRegistry) -> None:
        assert populated.is_entity(SimpleEntity)
        assert populated.is_value_object(Address)
        assert populated.is_value(Money)
        assert not populated.is_entity(Address)
        assert not populated.is_value(int)

    def test_kind_listings(self, populated: TypeRegistry) -> None:
        assert [e.cls for e in populated.entities()] == [SimpleEntity]
        assert [v.cls for v in populated.value_objects()] == [Address]
        assert [v.cls for v in populated.value_types()] == [Money]
        assert {m.cls for m in populated} == {SimpleEntity, Address, Money}

    def test_lookup_by_name(self, populated: TypeRegistry) -> None:
        assert populated.type_to_name(Address) == type_name(Address)
        assert populated.lookup_by_name(type_name(Address)).cls is Address
        assert populated.lookup_by_name("nowhere.Missing") is None

    def test_get_unknown(self, populated: TypeRegistry) -> None:
        assert populated.lookup(datetime) is None
        with pytest.raises(UnknownManagedType, match="datetime"):
            populated.get(datetime)
        with pytest.raises(KeyError):
            populated.get(datetime)

    def test_primitives(self, populated: TypeRegistry) -> None:
        assert populated.is_primitive_cls(int)
        assert populated.is_primitive_cls(datetime)
        assert not populated.is_primitive_cls(Money)
