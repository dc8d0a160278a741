"""In-process storage gateway.

No external calls. Useful for local development and tests, and as a
template for new storage adapters.
"""

from capcode.storage.base import BaseStorageGateway
from capcode.storage.models import Record


class InMemoryStorageGateway(BaseStorageGateway):
    """Appends records to a list held for the life of the process."""

    def __init__(self) -> None:
        self._records: list[Record] = []

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    def put(self, record: Record) -> None:
        self._records.append(record)
