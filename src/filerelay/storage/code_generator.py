"""Short share code generation."""

from __future__ import annotations

import secrets
import string
from dataclasses import dataclass

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 6


@dataclass(frozen=True, slots=True)
class CodeGenerator:
    """Produce short uppercase alphanumeric codes.

    Uniqueness is not guaranteed here; callers must check the live index
    and regenerate on collision.
    """

    length: int = CODE_LENGTH
    alphabet: str = CODE_ALPHABET

    def __post_init__(self) -> None:
        if self.length <= 0:
            raise ValueError("length must be positive")
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")

    def generate(self) -> str:
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))


__all__ = ["CODE_ALPHABET", "CODE_LENGTH", "CodeGenerator"]
