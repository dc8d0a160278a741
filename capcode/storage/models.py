from dataclasses import dataclass
from datetime import datetime, timezone


def isoformat_utc(moment: datetime) -> str:
    """Render *moment* as ISO-8601 UTC with milliseconds, e.g. 2024-01-01T12:00:00.000Z."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class Record:
    """A derived capcode ready to be written once by a storage gateway."""

    transformed_identifier: str
    created_at: datetime

    def __post_init__(self) -> None:
        if not self.transformed_identifier:
            raise ValueError("Record.transformed_identifier must be non-empty")
        if self.created_at.tzinfo is None:
            raise ValueError("Record.created_at must be timezone-aware")

    def to_item(self) -> dict[str, str]:
        """Stored item shape: capcode + ISO timestamp."""
        return {
            "capcode": self.transformed_identifier,
            "timestamp": isoformat_utc(self.created_at),
        }
