from capcode.config.settings import Settings
from capcode.database.repositories.capcode_repository import CapcodeRepository
from capcode.storage.base import BaseStorageGateway
from capcode.storage.memory_gateway import InMemoryStorageGateway


class StorageGatewayFactory:
    """Creates the storage gateway selected by settings.storage_backend."""

    BACKENDS: tuple[str, ...] = ("postgres", "memory")

    @classmethod
    def create(cls, settings: Settings) -> BaseStorageGateway:
        backend = settings.storage_backend.lower()
        if backend == "postgres":
            return CapcodeRepository(settings.capcode_table)
        if backend == "memory":
            return InMemoryStorageGateway()
        raise ValueError(
            f"Unknown storage backend '{backend}'. Choose from: {list(cls.BACKENDS)}"
        )
