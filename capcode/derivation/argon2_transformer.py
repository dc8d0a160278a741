"""Argon2 derivation of capcodes.

The identifier space holds only 9,000,000 values, so the stored form must be
expensive to brute-force. Argon2 is memory-hard; the ``id`` variant also
resists side-channel attacks and is the default.
"""

import secrets
from typing import ClassVar

from argon2.low_level import Type, hash_secret

from capcode.derivation.base import BaseTransformer
from capcode.derivation.exceptions import DerivationError
from capcode.derivation.models import Argon2Variant, SaltMode, TransformConfig


class Argon2Transformer(BaseTransformer):
    """Derives PHC-encoded Argon2 strings via argon2-cffi's low-level API."""

    PER_RECORD_SALT_BYTES: ClassVar[int] = 16

    _TYPES: ClassVar[dict[Argon2Variant, Type]] = {
        Argon2Variant.ARGON2I: Type.I,
        Argon2Variant.ARGON2D: Type.D,
        Argon2Variant.ARGON2ID: Type.ID,
    }

    def derive(self, identifier: str, config: TransformConfig) -> str:
        try:
            salt = self._salt_for(config)
            encoded = hash_secret(
                identifier.encode("utf-8"),
                salt,
                time_cost=config.time_cost,
                memory_cost=config.memory_cost,
                parallelism=config.parallelism,
                hash_len=config.hash_len,
                type=self._TYPES[config.variant],
            )
        except Exception as exc:
            raise DerivationError(f"Failed to hash capcode: {exc}") from exc
        return encoded.decode("ascii")

    def _salt_for(self, config: TransformConfig) -> bytes:
        if config.salt_mode is SaltMode.PER_RECORD:
            return secrets.token_bytes(self.PER_RECORD_SALT_BYTES)
        return config.shared_salt
