from abc import ABC, abstractmethod


class BaseIdentifierGenerator(ABC):
    """Contract for capcode candidate generators."""

    @abstractmethod
    def generate(self) -> str:
        """Return a fresh 7-digit decimal identifier.

        Raises:
            GenerationError: if the randomness source fails.
        """
