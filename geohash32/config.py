from dataclasses import dataclass, replace

MIN_HASH_LENGTH = 1
MAX_HASH_LENGTH = 12
DEFAULT_HASH_LENGTH = 5


def clamp_length(length: int) -> int:
    return max(MIN_HASH_LENGTH, min(MAX_HASH_LENGTH, length))


@dataclass(frozen=True)
class EngineConfig:
    """Immutable engine settings. ``hash_length`` is clamped into [1, 12]."""

    hash_length: int = DEFAULT_HASH_LENGTH

    def __post_init__(self):
        object.__setattr__(self, "hash_length", clamp_length(int(self.hash_length)))

    def replace(self, **changes) -> "EngineConfig":
        return replace(self, **changes)
