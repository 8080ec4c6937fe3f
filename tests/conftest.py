"""Shared pytest fixtures for metamodel tests."""

from __future__ import annotations

import pytest

from metamodel import MappingStyle, MetamodelBuilder, metamodel_builder
from metamodel.metadata import ManagedClassFactory


@pytest.fixture
def builder() -> MetamodelBuilder:
    """Fresh builder in the configuring state."""
    return metamodel_builder()


@pytest.fixture
def field_factory() -> ManagedClassFactory:
    return ManagedClassFactory(MappingStyle.FIELD)


@pytest.fixture
def accessor_factory() -> ManagedClassFactory:
    return ManagedClassFactory(MappingStyle.ACCESSOR)
