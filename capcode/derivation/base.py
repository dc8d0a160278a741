from abc import ABC, abstractmethod

from capcode.derivation.models import TransformConfig


class BaseTransformer(ABC):
    """Contract for irreversible identifier derivation."""

    @abstractmethod
    def derive(self, identifier: str, config: TransformConfig) -> str:
        """Derive the encoded, irreversible form of *identifier*.

        Args:
            identifier: 7-digit capcode candidate.
            config: Cost parameters, variant and salt settings.

        Returns:
            Encoded string carrying algorithm tag, parameters, salt and hash.

        Raises:
            DerivationError: on any failure. No partial output is returned.
        """
