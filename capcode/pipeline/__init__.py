from capcode.pipeline.models import Failure, Outcome, RecoveredData, Stage, Success
from capcode.pipeline.orchestrator import Orchestrator, build_orchestrator

__all__ = [
    "Failure",
    "Orchestrator",
    "Outcome",
    "RecoveredData",
    "Stage",
    "Success",
    "build_orchestrator",
]
