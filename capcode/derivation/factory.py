from capcode.config.settings import Settings
from capcode.derivation.argon2_transformer import Argon2Transformer
from capcode.derivation.base import BaseTransformer
from capcode.derivation.models import Argon2Variant, SaltMode, TransformConfig
from capcode.logging.logger import Log


class TransformerFactory:
    """Creates the derivation adapter and its configuration from settings."""

    @classmethod
    def create(cls, settings: Settings) -> BaseTransformer:
        _ = settings  # Argon2 is the only supported primitive
        return Argon2Transformer()

    @classmethod
    def create_config(cls, settings: Settings) -> TransformConfig:
        """Build the TransformConfig once at startup.

        Raises:
            ValueError: on an unknown variant or salt mode.
        """
        config = TransformConfig(
            salt=settings.hash_salt.encode("utf-8") if settings.hash_salt else None,
            time_cost=settings.hash_time_cost,
            memory_cost=settings.hash_memory_cost,
            parallelism=settings.hash_parallelism,
            variant=cls._resolve_variant(settings.hash_variant),
            salt_mode=cls._resolve_salt_mode(settings.hash_salt_mode),
        )
        if config.uses_default_salt:
            Log.warning("HASH_SALT is not set; deriving capcodes with the default salt")
        elif config.salt_mode is SaltMode.PER_RECORD and config.salt:
            Log.warning("HASH_SALT is ignored in per_record salt mode")
        return config

    @classmethod
    def _resolve_variant(cls, raw: str) -> Argon2Variant:
        value = raw.strip().lower().removeprefix("argon2")
        try:
            return Argon2Variant(value)
        except ValueError:
            raise ValueError(
                f"Unknown hash variant '{raw}'. Choose from: {[v.value for v in Argon2Variant]}"
            ) from None

    @classmethod
    def _resolve_salt_mode(cls, raw: str) -> SaltMode:
        try:
            return SaltMode(raw.strip().lower())
        except ValueError:
            raise ValueError(
                f"Unknown salt mode '{raw}'. Choose from: {[m.value for m in SaltMode]}"
            ) from None
