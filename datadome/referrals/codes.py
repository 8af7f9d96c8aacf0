"""Referral code generation."""
from __future__ import annotations

import secrets
from typing import Optional, Protocol, Sequence

ALPHABET = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
CODE_LENGTH = 6


class RandomSource(Protocol):
    """Anything exposing ``choice``, e.g. :class:`random.Random` or :class:`secrets.SystemRandom`."""

    def choice(self, seq: Sequence[str]) -> str:  # pragma: no cover - runtime protocol
        ...


def generate_referral_code(length: int = CODE_LENGTH, random_source: Optional[RandomSource] = None) -> str:
    """Generates a short uppercase referral code with low typo ambiguity."""
    if length <= 0:
        raise ValueError("length must be positive")
    source = random_source or secrets.SystemRandom()
    return "".join(source.choice(ALPHABET) for _ in range(length))
