from abc import ABC, abstractmethod

from capcode.storage.models import Record


class BaseStorageGateway(ABC):
    """Contract for all record storage adapters."""

    @abstractmethod
    def put(self, record: Record) -> None:
        """Write *record* once. Not idempotent; duplicates are not detected.

        Raises:
            StorageError: if the backend rejects or cannot accept the write.
        """
