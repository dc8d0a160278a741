from dataclasses import dataclass
from enum import Enum

# Used when no salt is configured. Shared by every deployment that forgets
# HASH_SALT, so it only protects against generic precomputed tables.
DEFAULT_SALT = b"defaultsalt"


class Argon2Variant(str, Enum):
    ARGON2I = "i"
    ARGON2D = "d"
    ARGON2ID = "id"


class SaltMode(str, Enum):
    """Where the derivation salt comes from.

    SHARED reuses the configured salt for every identifier, so the same
    identifier always derives to the same string within a deployment.
    PER_RECORD draws a fresh random salt for each derivation; the salt is
    embedded in the encoded output.
    """

    SHARED = "shared"
    PER_RECORD = "per_record"


@dataclass(frozen=True)
class TransformConfig:
    """Argon2 parameters for one deployment."""

    salt: bytes | None = None
    time_cost: int = 3
    memory_cost: int = 4096  # KiB
    parallelism: int = 1
    variant: Argon2Variant = Argon2Variant.ARGON2ID
    salt_mode: SaltMode = SaltMode.SHARED
    hash_len: int = 32

    @property
    def uses_default_salt(self) -> bool:
        return self.salt_mode is SaltMode.SHARED and not self.salt

    @property
    def shared_salt(self) -> bytes:
        return self.salt or DEFAULT_SALT
