"""Maps pipeline outcomes onto the trigger endpoint's JSON contract.

Framework-agnostic: the HTTP layer only needs ``status_code`` and ``body``.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from capcode.pipeline.models import Failure, Outcome, Success
from capcode.storage.models import isoformat_utc


@dataclass(frozen=True)
class CapcodeResponse:
    status_code: int
    body: dict[str, Any]


def to_response(outcome: Outcome) -> CapcodeResponse:
    """Build the response for *outcome*.

    Success -> 200 with ``data``. Persistence failure -> 500 with
    ``testData`` holding the recovered result. Any other failure -> 500
    with ``message`` and ``error`` only.
    """
    if isinstance(outcome, Success):
        return CapcodeResponse(
            status_code=200,
            body={
                "success": True,
                "message": outcome.message,
                "data": _payload(outcome.original, outcome.transformed, outcome.created_at),
            },
        )
    if isinstance(outcome, Failure):
        body: dict[str, Any] = {
            "success": False,
            "message": outcome.message,
            "error": outcome.error,
        }
        if outcome.recovered is not None:
            body["testData"] = _payload(
                outcome.recovered.original,
                outcome.recovered.transformed,
                outcome.recovered.created_at,
            )
        return CapcodeResponse(status_code=500, body=body)
    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")


def _payload(original: str, transformed: str, created_at: datetime) -> dict[str, str]:
    return {
        "originalNumber": original,
        "hashedCapcode": transformed,
        "timestamp": isoformat_utc(created_at),
    }
