import secrets
from typing import ClassVar

from capcode.identifier.base import BaseIdentifierGenerator
from capcode.identifier.exceptions import GenerationError


class IdentifierGenerator(BaseIdentifierGenerator):
    """Draws identifiers uniformly from [1_000_000, 9_999_999] via the OS CSPRNG."""

    MIN_VALUE: ClassVar[int] = 1_000_000
    MAX_VALUE: ClassVar[int] = 9_999_999

    def generate(self) -> str:
        span = self.MAX_VALUE - self.MIN_VALUE + 1
        try:
            value = self.MIN_VALUE + secrets.randbelow(span)
        except Exception as exc:
            raise GenerationError(f"Failed to generate random number: {exc}") from exc
        return f"{value:07d}"
