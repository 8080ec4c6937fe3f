from enum import StrEnum


class BootState(StrEnum):
	""" Bootstrap pipeline states. Transitions only move forward: CONFIGURING -> BOOTING_SERIALIZATION -> RESOLVING_METADATA -> READY.
	Any failure during build() moves the pipeline to FAILED, which is terminal. """
	CONFIGURING = "configuring"
	BOOTING_SERIALIZATION = "booting_serialization"
	RESOLVING_METADATA = "resolving_metadata"
	READY = "ready"
	FAILED = "failed"


ORDERED_BOOT_STATES: tuple[BootState, ...] = (
	BootState.CONFIGURING,
	BootState.BOOTING_SERIALIZATION,
	BootState.RESOLVING_METADATA,
	BootState.READY,
)

def is_valid_transition(current: BootState, target: BootState) -> bool:
	""" Only single steps forward, or a jump to FAILED from any in-flight state. """
	if target is BootState.FAILED:
		return current in (BootState.BOOTING_SERIALIZATION, BootState.RESOLVING_METADATA)
	if current not in ORDERED_BOOT_STATES or target not in ORDERED_BOOT_STATES:
		return False
	return ORDERED_BOOT_STATES.index(target) == ORDERED_BOOT_STATES.index(current) + 1
