"""
ContentHash value object for duplicate-detection analytics.

Generation records store the hash of the exact source text so repeated
submissions of the same text can be spotted without keeping the text itself.
"""

import hashlib
from dataclasses import dataclass
from typing import Self

_CONTENT_HASH_LENGTH = 64


@dataclass(frozen=True)
class ContentHash:
    """SHA-256 hex digest of a piece of text."""

    value: str

    def __post_init__(self) -> None:
        if len(self.value) != _CONTENT_HASH_LENGTH:
            raise ValueError("ContentHash must be 64 character hex string (SHA-256)")

        try:
            int(self.value, 16)
        except ValueError as err:
            raise ValueError("ContentHash must be valid hexadecimal string") from err

    @classmethod
    def compute(cls, content: str) -> Self:
        """
        Compute ContentHash from the exact text, without normalization.

        Args:
            content: Text content to hash

        Returns:
            ContentHash instance with computed hash
        """
        hash_value = hashlib.sha256(content.encode("utf-8")).hexdigest()
        return cls(hash_value)
