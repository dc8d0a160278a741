from collections.abc import Callable
from datetime import datetime, timezone

from capcode.config.settings import Settings
from capcode.derivation.base import BaseTransformer
from capcode.derivation.exceptions import DerivationError
from capcode.derivation.factory import TransformerFactory
from capcode.derivation.models import TransformConfig
from capcode.identifier.base import BaseIdentifierGenerator
from capcode.identifier.exceptions import GenerationError
from capcode.identifier.generator import IdentifierGenerator
from capcode.logging.logger import Log
from capcode.pipeline.models import (
    GENERIC_FAILURE_MESSAGE,
    PERSISTENCE_FAILURE_MESSAGE,
    Failure,
    Outcome,
    RecoveredData,
    Stage,
    Success,
)
from capcode.storage.base import BaseStorageGateway
from capcode.storage.exceptions import StorageError
from capcode.storage.factory import StorageGatewayFactory
from capcode.storage.models import Record


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _describe(exc: Exception, stage_error: type[Exception], prefix: str) -> str:
    """Stage errors already carry their prefix; foreign errors get it added."""
    if isinstance(exc, stage_error):
        return str(exc)
    return f"{prefix}: {exc}"


class Orchestrator:
    """Runs generate -> derive -> persist once and classifies the result.

    Each run is single-pass with no retries. A derivation failure hands back
    nothing, since the raw identifier is the secret being protected. A
    persistence failure hands back the identifier and its derived form so the
    expensive work is not lost.
    """

    def __init__(
        self,
        generator: BaseIdentifierGenerator,
        transformer: BaseTransformer,
        transform_config: TransformConfig,
        gateway: BaseStorageGateway,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._generator = generator
        self._transformer = transformer
        self._transform_config = transform_config
        self._gateway = gateway
        self._clock = clock

    def run(self) -> Outcome:
        try:
            original = self._generator.generate()
        except Exception as exc:
            error = _describe(exc, GenerationError, "Failed to generate random number")
            Log.error(f"Capcode generation failed: {error}", exc=exc)
            return Failure(
                stage=Stage.GENERATION_FAILED,
                message=GENERIC_FAILURE_MESSAGE,
                error=error,
            )
        Log.debug("Generated capcode candidate")

        try:
            transformed = self._transformer.derive(original, self._transform_config)
            if not transformed:
                raise DerivationError("Failed to hash capcode: empty derivation output")
        except Exception as exc:
            error = _describe(exc, DerivationError, "Failed to hash capcode")
            Log.error(f"Capcode derivation failed: {error}", exc=exc)
            return Failure(
                stage=Stage.DERIVATION_FAILED,
                message=GENERIC_FAILURE_MESSAGE,
                error=error,
            )
        Log.debug("Derived capcode hash")

        record: Record | None = None
        try:
            record = Record(transformed_identifier=transformed, created_at=self._clock())
            self._gateway.put(record)
        except Exception as exc:
            error = _describe(exc, StorageError, "Failed to save to database")
            Log.error(f"Capcode persistence failed: {error}", exc=exc)
            # A broken clock leaves no record; fall back to the real time.
            created_at = record.created_at if record is not None else utc_now()
            return Failure(
                stage=Stage.PERSISTENCE_FAILED,
                message=PERSISTENCE_FAILURE_MESSAGE,
                error=error,
                recovered=RecoveredData(
                    original=original,
                    transformed=transformed,
                    created_at=created_at,
                ),
            )

        Log.info("Capcode generated and saved")
        return Success(
            original=original,
            transformed=transformed,
            created_at=record.created_at,
        )


def build_orchestrator(settings: Settings) -> Orchestrator:
    """Build an Orchestrator with the configured adapters."""
    return Orchestrator(
        generator=IdentifierGenerator(),
        transformer=TransformerFactory.create(settings),
        transform_config=TransformerFactory.create_config(settings),
        gateway=StorageGatewayFactory.create(settings),
    )
