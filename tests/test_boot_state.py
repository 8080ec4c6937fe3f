"""Tests for bootstrap state transitions."""

from metamodel import BootState
from metamodel.bootstrap.boot_state import is_valid_transition


class TestBootState:
    def test_forward_single_steps(self) -> None:
        assert is_valid_transition(BootState.CONFIGURING, BootState.BOOTING_SERIALIZATION)
        assert is_valid_transition(BootState.BOOTING_SERIALIZATION, BootState.RESOLVING_METADATA)
        assert is_valid_transition(BootState.RESOLVING_METADATA, BootState.READY)

    def test_no_skipping_or_going_back(self) -> None:
        assert not is_valid_transition(BootState.CONFIGURING, BootState.RESOLVING_METADATA)
        assert not is_valid_transition(BootState.CONFIGURING, BootState.READY)
        assert not is_valid_transition(BootState.READY, BootState.CONFIGURING)
        assert not is_valid_transition(BootState.RESOLVING_METADATA, BootState.BOOTING_SERIALIZATION)

    def test_failure_only_while_building(self) -> None:
        assert is_valid_transition(BootState.BOOTING_SERIALIZATION, BootState.FAILED)
        assert is_valid_transition(BootState.RESOLVING_METADATA, BootState.FAILED)
        assert not is_valid_transition(BootState.CONFIGURING, BootState.FAILED)
        assert not is_valid_transition(BootState.READY, BootState.FAILED)
        assert not is_valid_transition(BootState.FAILED, BootState.READY)
