from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Stage(str, Enum):
    """Pipeline stage at which a run terminated unsuccessfully."""

    GENERATION_FAILED = "generation_failed"
    DERIVATION_FAILED = "derivation_failed"
    PERSISTENCE_FAILED = "persistence_failed"


SUCCESS_MESSAGE = "Capcode generated and saved successfully"
GENERIC_FAILURE_MESSAGE = "Failed to generate capcode"
PERSISTENCE_FAILURE_MESSAGE = "Capcode generated but failed to save to database"


@dataclass(frozen=True)
class RecoveredData:
    """Already-computed result handed back when only persistence failed."""

    original: str
    transformed: str
    created_at: datetime


@dataclass(frozen=True)
class Success:
    original: str
    transformed: str
    created_at: datetime
    message: str = SUCCESS_MESSAGE


@dataclass(frozen=True)
class Failure:
    stage: Stage
    message: str
    error: str
    recovered: RecoveredData | None = None

    def __post_init__(self) -> None:
        # Only a persistence failure has a trustworthy result to hand back.
        if self.recovered is not None and self.stage is not Stage.PERSISTENCE_FAILED:
            raise ValueError(f"recovered data is not allowed for stage {self.stage.value}")


Outcome = Success | Failure
