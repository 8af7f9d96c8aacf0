"""Remembers the numbers most recently topped up."""
from __future__ import annotations

from typing import List, Optional

from .networks import strip_digits
from .store import SnapshotStore

RECENT_NUMBERS_KEY = "recent_numbers"
LAST_NUMBER_KEY = "last_number"
MAX_RECENT_NUMBERS = 2


def recent_numbers(store: SnapshotStore) -> List[str]:
    stored = store.load(RECENT_NUMBERS_KEY)
    if not isinstance(stored, list):
        return []
    return [str(number) for number in stored][:MAX_RECENT_NUMBERS]


def last_number(store: SnapshotStore) -> Optional[str]:
    stored = store.load(LAST_NUMBER_KEY)
    return str(stored) if stored else None


def remember_number(store: SnapshotStore, phone: str) -> List[str]:
    """Move ``phone`` to the front of the recent list and record it as the last number."""

    digits = strip_digits(phone)
    if not digits:
        return recent_numbers(store)
    numbers = [digits, *(number for number in recent_numbers(store) if number != digits)]
    numbers = numbers[:MAX_RECENT_NUMBERS]
    store.save(RECENT_NUMBERS_KEY, numbers)
    store.save(LAST_NUMBER_KEY, digits)
    return numbers


__all__ = ["last_number", "recent_numbers", "remember_number"]
